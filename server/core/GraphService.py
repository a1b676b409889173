from shared.clients.archive.ArchiveClientInterface import ArchiveClientInterface
from shared.graph import graph_explorer
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import RelatedDocument
from shared.models.graph import GraphData, GraphNode, NODE_GROUPS, RankedNode


class GraphService:
    """Serves the entity graph of the first archive client and answers sidebar lookups."""

    def __init__(
        self,
        helper_config: HelperConfig,
        archive_clients: list[ArchiveClientInterface],
    ) -> None:
        self.logging = helper_config.get_logger()
        self._archive_client = archive_clients[0] if archive_clients else None

    ##########################################
    ################ CORE ####################
    ##########################################

    async def get_graph(self, groups: list[str] | None = None) -> GraphData:
        """Return the graph, restricted to the given node groups if any.

        Raises:
            Exception: If no archive client is configured or the fetch fails.
        """
        if self._archive_client is None:
            raise Exception("No archive client configured for the graph.")
        graph = await self._archive_client.get_graph()
        if groups:
            return graph_explorer.filter_by_groups(graph, groups)
        return graph

    async def get_top_connected(self, limit: int = 30) -> list[RankedNode]:
        return graph_explorer.top_connected(await self.get_graph(), limit=limit)

    async def get_suggestions(self, query: str, groups: list[str] | None = None) -> dict[str, list[GraphNode]]:
        return graph_explorer.suggest_nodes(await self.get_graph(), query, groups=groups or NODE_GROUPS)

    async def get_node_details(
        self, node_id: str
    ) -> tuple[GraphNode, dict[str, list[GraphNode]], list[RelatedDocument]] | None:
        """Look up a node, its neighbors grouped by type and the documents that mention it.

        Returns:
            The (node, connected, related documents) triple, or None if the node does not exist.
        """
        graph = await self.get_graph()
        node = next((n for n in graph.nodes if n.id == node_id), None)
        if node is None:
            return None

        connected = graph_explorer.connected_by_group(graph, node_id)
        try:
            related = await self._archive_client.do_fetch_related_documents(node_id)
        except Exception as e:
            self.logging.warning("Related documents for node %s could not be fetched: %s", node_id, e)
            related = []
        self.logging.debug("Node %s: %d connected groups, %d related documents", node_id, len(connected), len(related))
        return node, connected, related
