"""Base entity for domain layer."""


class BaseEntity:
    """Base class for all domain entities."""

    def __init__(self, id: int | None = None) -> None:
        self.id = id

    def __eq__(self, other: object) -> bool:
        """Entities with an ID compare by type and ID."""
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))
