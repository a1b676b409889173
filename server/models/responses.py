from pydantic import BaseModel

from shared.models.document import ArchiveDocument, RelatedDocument
from shared.models.filters import SearchFilters
from shared.models.graph import GraphNode
from shared.models.search import ActiveFilterChip, HighlightSegment


class DocumentsStatusResponse(BaseModel):
    loaded: bool
    total: int
    error: str | None = None


class FilterStateResponse(BaseModel):
    filters: SearchFilters
    active_filter_count: int
    active_filters: list[ActiveFilterChip]


class SearchResponse(FilterStateResponse):
    """Filtered documents plus the numbers shown above the result list.

    ``count`` is the number of matches before offset/limit are applied;
    ``total`` is the size of the whole collection. ``title_highlights`` runs
    parallel to ``results``.
    """

    results: list[ArchiveDocument]
    title_highlights: list[list[HighlightSegment]]
    count: int
    total: int
    elapsed_ms: float


class GraphNodeDetailsResponse(BaseModel):
    node: GraphNode
    connected: dict[str, list[GraphNode]]
    related_documents: list[RelatedDocument]
