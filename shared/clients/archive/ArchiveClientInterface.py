import asyncio
from abc import abstractmethod

import httpx

from shared.clients.ClientInterface import ClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument, RelatedDocument
from shared.models.graph import GraphData, GraphLink, GraphNode


class ArchiveClientInterface(ClientInterface):
    """Data-fetch collaborator for the archive: documents plus the entity graph.

    Subclasses supply endpoints, pagination parameters and row parsers for one
    backend. Fetched data is cached for the lifetime of the client.
    """

    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)

        # cache
        self._cache_documents: list[ArchiveDocument] | None = None
        self._cache_graph: GraphData | None = None

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_client_type(self) -> str:
        return "archive"

    @abstractmethod
    def _get_page_size(self) -> int:
        pass

    ################ ENDPOINTS ##################
    @abstractmethod
    def _get_endpoint_documents(self) -> str:
        pass

    @abstractmethod
    def _get_endpoint_nodes(self) -> str:
        pass

    @abstractmethod
    def _get_endpoint_links(self) -> str:
        pass

    @abstractmethod
    def _get_endpoint_document_nodes(self) -> str:
        pass

    ################ PARAMS ##################
    @abstractmethod
    def _get_params_documents(self, offset: int, limit: int) -> dict:
        """
        Query parameters for one page of the documents listing, newest year first.
        """
        pass

    @abstractmethod
    def _get_params_listing(self, offset: int, limit: int) -> dict:
        """
        Query parameters for one page of an unordered listing (nodes, links).
        """
        pass

    @abstractmethod
    def _get_params_document_ids_for_node(self, node_id: str) -> dict:
        pass

    @abstractmethod
    def _get_params_documents_by_ids(self, document_ids: list[str]) -> dict:
        pass

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    @abstractmethod
    def _parse_listing(self, response: httpx.Response) -> list[dict]:
        """
        Extract the list of raw rows from a listing response.

        Raises:
            Exception: If the response body is not a listing.
        """
        pass

    @abstractmethod
    def _parse_document_row(self, row: dict) -> ArchiveDocument:
        pass

    @abstractmethod
    def _parse_node_row(self, row: dict) -> GraphNode:
        pass

    @abstractmethod
    def _parse_link_row(self, row: dict) -> GraphLink:
        pass

    @abstractmethod
    def _parse_related_document_row(self, row: dict) -> RelatedDocument:
        pass

    @abstractmethod
    def _parse_document_node_row(self, row: dict) -> str:
        """
        Returns the document id referenced by a document/node association row.
        """
        pass

    ##########################################
    ############### REQUESTS #################
    ##########################################

    async def _do_fetch_all_rows(self, endpoint: str, params_builder) -> list[dict]:
        """
        Page through a listing endpoint until a short page is returned.

        Args:
            endpoint (str): Listing endpoint path.
            params_builder (Callable[[int, int], dict]): Builds the query parameters for (offset, limit).

        Returns:
            list[dict]: All raw rows in backend order.

        Raises:
            Exception: If a page request fails.
        """
        rows: list[dict] = []
        offset = 0
        page_size = self._get_page_size()
        while True:
            resp = await self.do_request(
                method="GET",
                endpoint=endpoint,
                params=params_builder(offset, page_size),
                raise_on_error=True,
            )
            page = self._parse_listing(resp)
            rows.extend(page)
            self.logging.debug("Fetched %d rows from %s%s, %d so far", len(page), self._get_engine_name(), endpoint, len(rows))
            if len(page) < page_size:
                break
            offset += page_size
        return rows

    async def do_fetch_documents(self) -> list[ArchiveDocument]:
        """
        Fetches the whole document collection from the backend.

        Returns:
            list[ArchiveDocument]: Normalized documents in backend order.

        Raises:
            Exception: If any page request fails.
        """
        rows = await self._do_fetch_all_rows(self._get_endpoint_documents(), self._get_params_documents)
        documents = [self._parse_document_row(row) for row in rows]
        self.logging.info("Fetched %d documents from %s", len(documents), self._get_engine_name())
        return documents

    async def do_fetch_graph(self) -> GraphData:
        """
        Fetches all graph nodes and links concurrently.

        Raises:
            Exception: If either listing fails.
        """
        node_rows, link_rows = await asyncio.gather(
            self._do_fetch_all_rows(self._get_endpoint_nodes(), self._get_params_listing),
            self._do_fetch_all_rows(self._get_endpoint_links(), self._get_params_listing),
        )
        graph = GraphData(
            nodes=[self._parse_node_row(row) for row in node_rows],
            links=[self._parse_link_row(row) for row in link_rows],
        )
        self.logging.info(
            "Fetched graph from %s: %d nodes, %d links",
            self._get_engine_name(),
            len(graph.nodes),
            len(graph.links),
        )
        return graph

    async def do_fetch_related_documents(self, node_id: str) -> list[RelatedDocument]:
        """
        Fetches the documents that mention a graph node.

        Args:
            node_id (str): The graph node id.

        Returns:
            list[RelatedDocument]: Short document references; empty if the node has none.

        Raises:
            Exception: If a request fails.
        """
        resp = await self.do_request(
            method="GET",
            endpoint=self._get_endpoint_document_nodes(),
            params=self._get_params_document_ids_for_node(node_id),
            raise_on_error=True,
        )
        document_ids = [self._parse_document_node_row(row) for row in self._parse_listing(resp)]
        if not document_ids:
            return []

        resp = await self.do_request(
            method="GET",
            endpoint=self._get_endpoint_documents(),
            params=self._get_params_documents_by_ids(document_ids),
            raise_on_error=True,
        )
        return [self._parse_related_document_row(row) for row in self._parse_listing(resp)]

    ##########################################
    ################# CACHE ##################
    ##########################################

    async def get_documents(self, force: bool = False) -> list[ArchiveDocument]:
        """
        Returns the cached documents, fetching them on first use or when forced.
        """
        if self._cache_documents is not None and not force:
            return self._cache_documents
        self._cache_documents = await self.do_fetch_documents()
        return self._cache_documents

    async def get_graph(self, force: bool = False) -> GraphData:
        """
        Returns the cached graph, fetching it on first use or when forced.
        """
        if self._cache_graph is not None and not force:
            return self._cache_graph
        self._cache_graph = await self.do_fetch_graph()
        return self._cache_graph
