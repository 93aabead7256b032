"""
Error taxonomy shared by the repository, service and delivery layers.

Only the delivery layer turns an error ``kind`` into an HTTP status code.
"""

from typing import Any, Optional


class TaskboardError(Exception):
    """Base class for every error raised by this service."""

    kind = "internal"

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InputError(TaskboardError):
    """Malformed request shape or types."""

    kind = "input"


class ValidationError(TaskboardError):
    """A business rule was violated."""

    kind = "validation"

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            message=f"Validation failed for {field}: {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class NotFoundError(TaskboardError):
    """The referenced entity is absent or already deleted."""

    kind = "not_found"

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(
            message=f"{entity} not found: {entity_id}",
            details={"entity": entity, "id": entity_id},
        )


class StorageError(TaskboardError):
    """The underlying store failed."""

    kind = "storage"

    def __init__(self, operation: str, entity: str, reason: Optional[str] = None):
        self.operation = operation
        self.entity = entity
        message = f"[{operation}]: Error on {entity}"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            details={"operation": operation, "entity": entity, "reason": reason},
        )
