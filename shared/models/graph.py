"""Pydantic models for the entity-relationship graph."""

from pydantic import BaseModel

NODE_GROUPS: tuple[str, ...] = ("persona", "organizacion", "lugar", "keyword")


class GraphNode(BaseModel):
    """A person, organization, place or keyword. ``val`` is the node weight."""

    id: str
    name: str
    group: str
    val: float = 1


class GraphLink(BaseModel):
    source: str
    target: str
    value: float = 1


class GraphData(BaseModel):
    nodes: list[GraphNode] = []
    links: list[GraphLink] = []


class RankedNode(GraphNode):
    """A node annotated with its number of links."""

    connections: int = 0
