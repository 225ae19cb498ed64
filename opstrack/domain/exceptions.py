"""Domain-specific exceptions — framework-independent.

The entity collections never raise for a missing record (they return
``None`` / ``False``); these exceptions cover the remaining failure modes.
"""


class EntityNotFoundError(Exception):
    """Raised by workflows that require an existing entity to proceed."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class InvalidReferenceError(ValueError):
    """Raised for a half-attached related-to pair or a non-attachable kind."""


class OperationNotSupportedError(Exception):
    """Raised when an operation is not offered for an entity kind.

    Activities are append-only and milestones cannot be deleted.
    """

    def __init__(self, operation: str, entity_type: str):
        self.operation = operation
        self.entity_type = entity_type
        super().__init__(f"'{operation}' is not supported for {entity_type} records")


class TenderConversionError(Exception):
    """Raised when a tender cannot be converted into a project."""

    def __init__(self, tender_id: int, reason: str):
        self.tender_id = tender_id
        self.reason = reason
        super().__init__(f"Tender {tender_id} cannot be converted: {reason}")


class EntityInUseError(Exception):
    """Raised when a record cannot be deleted because other records depend on it."""

    def __init__(self, entity_type: str, entity_id: int):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' is still referenced by other records")
