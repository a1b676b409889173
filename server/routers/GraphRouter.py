from fastapi import APIRouter, HTTPException, Query, Request

from server.models.responses import GraphNodeDetailsResponse
from shared.models.graph import GraphData, GraphNode, RankedNode

router = APIRouter(prefix="/graph", tags=["graph"])


async def _load(request: Request, call):
    try:
        return await call(request.app.state.graph_service)
    except Exception as e:
        request.app.state.logging.error("Graph request failed: %s", e)
        raise HTTPException(status_code=503, detail="Error cargando grafo")


@router.get("")
async def graph_data(request: Request, groups: list[str] | None = Query(default=None)) -> GraphData:
    """Return nodes and links, optionally restricted to some node groups (persona, lugar, ...)."""
    return await _load(request, lambda service: service.get_graph(groups=groups))


@router.get("/top")
async def graph_top(request: Request, limit: int = Query(default=30, ge=1, le=500)) -> list[RankedNode]:
    """Return the most connected nodes."""
    return await _load(request, lambda service: service.get_top_connected(limit=limit))


@router.get("/suggestions")
async def graph_suggestions(
    request: Request,
    q: str = "",
    groups: list[str] | None = Query(default=None),
) -> dict[str, list[GraphNode]]:
    """Search-as-you-type over node names, grouped by node group."""
    return await _load(request, lambda service: service.get_suggestions(q, groups=groups))


@router.get("/nodes/{node_id}")
async def graph_node_details(request: Request, node_id: str) -> GraphNodeDetailsResponse:
    """Return a node with its neighbors and the documents that mention it.

    Raises:
        HTTPException: 404 if the node does not exist, 503 if the graph cannot be fetched.
    """
    details = await _load(request, lambda service: service.get_node_details(node_id))
    if details is None:
        raise HTTPException(status_code=404, detail=f"Unknown graph node '{node_id}'")
    node, connected, related = details
    return GraphNodeDetailsResponse(node=node, connected=connected, related_documents=related)
