from fastapi import APIRouter, Request

from server.models.requests import FilterActionRequest
from server.models.responses import FilterStateResponse
from shared.models.filters import EMPTY_FILTERS, SearchFilters
from shared.search.filter_state import active_filter_chips, active_filter_count

router = APIRouter(prefix="/filters", tags=["filters"])


def _state(filters: SearchFilters) -> FilterStateResponse:
    return FilterStateResponse(
        filters=filters,
        active_filter_count=active_filter_count(filters),
        active_filters=active_filter_chips(filters),
    )


@router.get("/empty")
async def filters_empty() -> FilterStateResponse:
    """Return the empty filter state."""
    return _state(EMPTY_FILTERS)


@router.post("/apply")
async def filters_apply(request: Request, body: FilterActionRequest) -> FilterStateResponse:
    """Apply one transition (toggle, remove, clear, ...) to a filter snapshot.

    Args:
        request (Request): FastAPI request (provides app.state.search_service).
        body (FilterActionRequest): The current filters and the action to apply.

    Returns:
        FilterStateResponse: The new filters with their active count and chips.
    """
    filters = request.app.state.search_service.apply_filter_action(body.filters, body.action)
    return _state(filters)
