"""Pydantic models for the search filter state."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

SET_FACET_KEYS: tuple[str, ...] = ("document_types", "classifications", "origins", "people")


class PresenceFilter(str, Enum):
    """Tri-state constraint on whether a document has a downloadable file."""

    REQUIRED = "required"
    EXCLUDED = "excluded"
    UNCONSTRAINED = "unconstrained"

    @classmethod
    def from_flag(cls, flag: "bool | None | PresenceFilter") -> "PresenceFilter":
        """Map the ``true`` / ``false`` / ``null`` flag used by the frontend onto the enum."""
        if isinstance(flag, PresenceFilter):
            return flag
        if flag is None:
            return cls.UNCONSTRAINED
        return cls.REQUIRED if flag else cls.EXCLUDED

    def as_flag(self) -> bool | None:
        if self is PresenceFilter.REQUIRED:
            return True
        if self is PresenceFilter.EXCLUDED:
            return False
        return None


class SearchFilters(BaseModel):
    """Immutable snapshot of the query and all structured filters.

    An empty facet set means "no constraint". Year bounds are kept as the
    strings typed by the user; an empty string means the bound is unset.
    """

    model_config = ConfigDict(frozen=True)

    query: str = ""
    document_types: frozenset[str] = frozenset()
    classifications: frozenset[str] = frozenset()
    origins: frozenset[str] = frozenset()
    people: frozenset[str] = frozenset()
    year_from: str = ""
    year_to: str = ""
    has_kdrive_link: PresenceFilter = PresenceFilter.UNCONSTRAINED

    @field_validator("query", "year_from", "year_to", mode="before")
    @classmethod
    def _normalize_text(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("has_kdrive_link", mode="before")
    @classmethod
    def _normalize_presence(cls, value):
        if value is None or isinstance(value, bool):
            return PresenceFilter.from_flag(value)
        return value

    @field_serializer("document_types", "classifications", "origins", "people")
    def _serialize_set(self, values: frozenset[str]) -> list[str]:
        return sorted(values)


EMPTY_FILTERS = SearchFilters()
