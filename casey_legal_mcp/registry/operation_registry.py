"""
Operation Registry - Typed catalog of legal case tools.

Provides:
- Immutable operation descriptors with JSON input schemas
- An ordered registry built once at startup and passed by reference
- The error taxonomy surfaced to the MCP host
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..config.settings import get_setting
from ..core.clock import Clock, IdGenerator
from ..utils.response import error_response

logger = logging.getLogger(__name__)

# Type aliases
JSONSchema = Dict[str, Any]


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class OperationContext:
    """
    Dependencies handed to every operation handler.

    The clock and id generator are injected so tests can pin time and ids.
    """
    case_id: str
    child_name: str
    server_name: str
    clock: Clock = field(default_factory=Clock)
    ids: Optional[IdGenerator] = None

    def __post_init__(self):
        """Default the id generator to one driven by the context clock."""
        if self.ids is None:
            object.__setattr__(self, "ids", IdGenerator(self.clock))

    @classmethod
    def from_settings(
        cls,
        clock: Optional[Clock] = None,
        ids: Optional[IdGenerator] = None
    ) -> "OperationContext":
        """Build a context from the configured case constants."""
        return cls(
            case_id=get_setting("case_id"),
            child_name=get_setting("child_name"),
            server_name=get_setting("server_name"),
            clock=clock or Clock(),
            ids=ids,
        )


Handler = Callable[[Dict[str, Any], OperationContext], str]


@dataclass(frozen=True)
class OperationDescriptor:
    """Describes one tool exposed to the host."""
    name: str                  # Tool identifier (e.g., "track_evidence")
    description: str           # Human-readable description
    input_schema: JSONSchema   # JSON Schema for tool arguments
    handler: Handler           # Renders the text report

    @property
    def required(self) -> List[str]:
        """Names of the required arguments."""
        return list(self.input_schema.get("required", []))


@dataclass(frozen=True)
class InvocationResult:
    """Result of a successful invocation."""
    text: str


# ============================================================================
# Exceptions
# ============================================================================

class OperationRegistryError(Exception):
    """Base exception for registry errors."""

    code = "registry_error"

    def to_response(self) -> Dict[str, Any]:
        """Structured error envelope for the host."""
        return error_response(str(self), code=self.code)


class OperationNotFound(OperationRegistryError):
    """Operation not found in registry."""

    code = "not_found"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")

    def to_response(self) -> Dict[str, Any]:
        return error_response(str(self), code=self.code, details={"tool": self.name})


class OperationExecutionError(OperationRegistryError):
    """A handler raised while building its result."""

    code = "internal_error"

    def __init__(self, name: str, message: str):
        self.name = name
        self.message = message
        super().__init__(f"Error executing {name}: {message}")

    def to_response(self) -> Dict[str, Any]:
        return error_response(str(self), code=self.code, details={"tool": self.name})


class OperationAlreadyRegistered(OperationRegistryError):
    """Operation already registered."""
    pass


class InvalidOperationDescriptor(OperationRegistryError):
    """Invalid operation descriptor."""
    pass


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """
    Ordered, read-only catalog of operations.

    Built once from a sequence of descriptors; there is no way to register or
    remove operations afterwards.
    """

    def __init__(self, operations: Sequence[OperationDescriptor]):
        """
        Build the registry.

        Args:
            operations: Descriptors in the order they should be listed

        Raises:
            OperationAlreadyRegistered: If two descriptors share a name
            InvalidOperationDescriptor: If a descriptor is incomplete
        """
        self._operations: Dict[str, OperationDescriptor] = {}

        for operation in operations:
            self._validate_descriptor(operation)

            if operation.name in self._operations:
                raise OperationAlreadyRegistered(
                    f"Operation '{operation.name}' already registered"
                )

            self._operations[operation.name] = operation
            logger.info(f"Registered operation: {operation.name}")

        self._order = tuple(self._operations.values())

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> OperationDescriptor:
        """
        Retrieve an operation by name.

        Raises:
            OperationNotFound: If operation doesn't exist
        """
        if name not in self._operations:
            raise OperationNotFound(name)

        return self._operations[name]

    def list(self) -> List[OperationDescriptor]:
        """All operations in definition order."""
        return list(self._order)

    def __len__(self) -> int:
        return len(self._order)

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _validate_descriptor(self, operation: OperationDescriptor) -> None:
        """
        Validate operation descriptor.

        Raises:
            InvalidOperationDescriptor: If validation fails
        """
        if not operation.name:
            raise InvalidOperationDescriptor("Operation name is required")

        if not operation.description:
            raise InvalidOperationDescriptor(
                f"Operation description is required ({operation.name})"
            )

        if operation.handler is None:
            raise InvalidOperationDescriptor(
                f"Operation handler is required ({operation.name})"
            )

        properties = operation.input_schema.get("properties", {})
        missing = [r for r in operation.required if r not in properties]
        if missing:
            raise InvalidOperationDescriptor(
                f"Required fields {missing} of '{operation.name}' are not declared in its schema"
            )
