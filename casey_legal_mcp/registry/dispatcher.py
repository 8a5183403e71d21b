"""Tool dispatcher: the two entry points the MCP host talks to."""

import logging
from typing import Any, List, Mapping, Optional

from .operation_registry import (
    InvocationResult,
    OperationContext,
    OperationDescriptor,
    OperationExecutionError,
    OperationNotFound,
    OperationRegistry,
)

logger = logging.getLogger(__name__)


class ToolDispatcher:
    """
    Routes invocations to registered handlers.

    Holds a reference to an immutable registry and the handler context; keeps
    no per-call state.
    """

    def __init__(self, registry: OperationRegistry, context: OperationContext):
        self.registry = registry
        self.context = context

    def list(self) -> List[OperationDescriptor]:
        """All operation descriptors in registry order."""
        return self.registry.list()

    def invoke(self, operation_name: str, arguments: Optional[Mapping[str, Any]] = None) -> InvocationResult:
        """
        Run the named operation.

        Args:
            operation_name: Registered tool name
            arguments: Tool arguments (``None`` is treated as empty)

        Returns:
            InvocationResult with the rendered report

        Raises:
            OperationNotFound: If no operation has this name
            OperationExecutionError: If the handler raised
        """
        if not isinstance(operation_name, str) or not operation_name:
            raise OperationNotFound(str(operation_name))

        operation = self.registry.get(operation_name)
        params = dict(arguments or {})

        logger.debug(f"Invoking {operation_name} with {sorted(params)}")

        try:
            text = operation.handler(params, self.context)
        except Exception as e:
            logger.error(f"Error executing tool {operation_name}: {e}")
            raise OperationExecutionError(operation_name, str(e)) from e

        return InvocationResult(text=text)
