from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from server.dependencies.auth import verify_api_key
from server.models.requests import SearchRequest
from server.models.responses import DocumentsStatusResponse, SearchResponse
from shared.models.facets import Facets
from shared.models.filters import EMPTY_FILTERS, SearchFilters
from shared.search.filter_state import active_filter_chips, active_filter_count
from shared.search.highlight import highlight_segments

router = APIRouter(prefix="/documents", tags=["documents"])


@router.get("/status")
async def documents_status(request: Request) -> DocumentsStatusResponse:
    """Report whether the collection is loaded, its size and the last fetch error."""
    search_service = request.app.state.search_service
    return DocumentsStatusResponse(
        loaded=search_service.is_loaded(),
        total=len(search_service.get_documents()),
        error=search_service.get_load_error(),
    )


@router.get("/facets")
async def documents_facets(request: Request) -> Facets:
    """Return the filter options derived from the loaded collection."""
    return request.app.state.search_service.get_facets()


@router.post("/search")
async def documents_search(request: Request, body: SearchRequest) -> SearchResponse:
    """Filter the collection with the given filter snapshot.

    Args:
        request (Request): FastAPI request (provides app.state.search_service).
        body (SearchRequest): Filter snapshot plus optional offset/limit for the returned slice.

    Returns:
        SearchResponse: Matching documents in collection order with counts and timing.
    """
    search_service = request.app.state.search_service
    result = search_service.search(body.filters)

    end = None if body.limit is None else body.offset + body.limit
    page = list(result.documents[body.offset:end])
    return SearchResponse(
        filters=body.filters,
        active_filter_count=active_filter_count(body.filters),
        active_filters=active_filter_chips(body.filters),
        results=page,
        title_highlights=[highlight_segments(doc.title, body.filters.query) for doc in page],
        count=len(result.documents),
        total=len(search_service.get_documents()),
        elapsed_ms=result.elapsed_ms,
    )


@router.post("/export")
async def documents_export(request: Request, body: SearchFilters = EMPTY_FILTERS) -> Response:
    """Download the filtered documents as a CSV file.

    Raises:
        HTTPException: 404 if no document matches the filters.
    """
    exported = request.app.state.search_service.export_csv(body)
    if exported is None:
        raise HTTPException(status_code=404, detail="No documents match the current filters.")
    filename, content = exported
    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/reload")
async def documents_reload(
    request: Request,
    _: None = Depends(verify_api_key),
) -> DocumentsStatusResponse:
    """Re-fetch the collection from the archive backends, bypassing their caches."""
    search_service = request.app.state.search_service
    request.app.state.logging.info("Reloading document collection...")
    await search_service.do_load_documents(force=True)
    return DocumentsStatusResponse(
        loaded=search_service.is_loaded(),
        total=len(search_service.get_documents()),
        error=search_service.get_load_error(),
    )
