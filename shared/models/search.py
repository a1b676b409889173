"""Pydantic models produced by the search engine."""

from pydantic import BaseModel, ConfigDict

from shared.models.document import ArchiveDocument


class SearchResult(BaseModel):
    """Documents that passed every active filter, in collection order.

    ``elapsed_ms`` is the wall-clock time of the filtering pass, for display only.
    """

    model_config = ConfigDict(frozen=True)

    documents: tuple[ArchiveDocument, ...] = ()
    elapsed_ms: float = 0.0


class ActiveFilterChip(BaseModel):
    """One entry of the "active filters" bar. Removing it calls remove_filter(key, value)."""

    key: str
    value: str | None = None
    label: str
    prefix: str


class HighlightSegment(BaseModel):
    text: str
    matched: bool = False
