"""
Operation registrations for the Casey legal MCP server.

Builds the five tool descriptors and the registry that holds them.
"""

from typing import List

from ..operation_registry import OperationContext, OperationDescriptor, OperationRegistry
from .case_operations import case_operations
from .welfare_operations import welfare_operations


def build_operations(case_id: str, child_name: str) -> List[OperationDescriptor]:
    """All tool descriptors in listing order."""
    return case_operations(case_id) + welfare_operations(case_id, child_name)


def create_registry(context: OperationContext) -> OperationRegistry:
    """Build the registry for a handler context."""
    return OperationRegistry(build_operations(context.case_id, context.child_name))


__all__ = [
    'build_operations',
    'create_registry',
    'case_operations',
    'welfare_operations',
]
