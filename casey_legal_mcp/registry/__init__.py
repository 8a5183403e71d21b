"""
Operation Registry for casey-legal-mcp-server.

Provides the typed catalog of legal case tools and the dispatcher that runs them.
"""

from .operation_registry import (
    OperationRegistry,
    OperationDescriptor,
    OperationContext,
    InvocationResult,
    # Exceptions
    OperationRegistryError,
    OperationNotFound,
    OperationExecutionError,
    OperationAlreadyRegistered,
    InvalidOperationDescriptor,
)
from .dispatcher import ToolDispatcher

__all__ = [
    'OperationRegistry',
    'OperationDescriptor',
    'OperationContext',
    'InvocationResult',
    'ToolDispatcher',
    # Exceptions
    'OperationRegistryError',
    'OperationNotFound',
    'OperationExecutionError',
    'OperationAlreadyRegistered',
    'InvalidOperationDescriptor',
]
