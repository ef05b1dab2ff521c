"""Event validation exceptions."""

from catalogfilter.domain.exceptions.base import CatalogFilterError


class EventValidationError(CatalogFilterError):
    """Event record has the wrong shape.

    Raised by the loader before any Event reaches the engine.

    Attributes:
        index: Position of the record in its source list (must be >= 0)
        reason: Why record is invalid (must not be empty)
    """

    def __init__(self, index: int, reason: str) -> None:
        # FAIL-FIRST validation
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")
        if not reason:
            raise ValueError("reason must not be empty")

        self.index = index
        self.reason = reason
        super().__init__(f"Invalid event record #{index}: {reason}")


class DuplicateEventError(CatalogFilterError):
    """Event name appears more than once in a catalog.

    Attributes:
        name: Repeated event name (must not be empty)
    """

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("name must not be empty")

        self.name = name
        super().__init__(f"Duplicate event name '{name}'")


class InvalidCallbackError(CatalogFilterError):
    """Non-callable passed where a callback is required.

    Attributes:
        obj_type: Type of the rejected object
    """

    def __init__(self, obj_type: type) -> None:
        self.obj_type = obj_type
        super().__init__(f"callback must be callable, got {obj_type.__name__}")
