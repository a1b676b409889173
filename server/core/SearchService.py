"""Search service.

Holds the document collection loaded from the archive clients and answers
facet, search and export requests against it. Facets are memoized per
collection version; the latest search result is memoized per
(collection version, filters) key.
"""

from collections.abc import Iterable

from shared.clients.archive.ArchiveClientInterface import ArchiveClientInterface
from shared.export.csv_export import build_csv, export_filename
from shared.helper.HelperConfig import HelperConfig
from shared.models.document import ArchiveDocument
from shared.models.facets import Facets
from shared.models.filters import SearchFilters
from shared.models.search import SearchResult
from shared.search import filter_state
from shared.search.facet_extractor import extract_facets
from shared.search.query_evaluator import search
from server.models.requests import FilterAction

DEFAULT_LOAD_ERROR = "Error cargando documentos"


class SearchService:
    """Owns the in-memory collection and runs the search engine over it."""

    def __init__(
        self,
        helper_config: HelperConfig,
        archive_clients: list[ArchiveClientInterface],
    ) -> None:
        self.logging = helper_config.get_logger()
        self._archive_clients = archive_clients

        self._documents: tuple[ArchiveDocument, ...] = ()
        self._version = 0
        self._loaded = False
        self._load_error: str | None = None

        # memo
        self._facets_cache: tuple[int, Facets] | None = None
        self._result_cache: tuple[tuple[int, SearchFilters], SearchResult] | None = None

    ##########################################
    ############### LOADING ##################
    ##########################################

    async def do_load_documents(self, force: bool = False) -> None:
        """Fetch the collection from every archive client.

        Fetch failures are logged and kept as the status error message; the
        previously loaded collection, if any, stays in place.

        Args:
            force (bool): Bypass the clients' caches.
        """
        documents: list[ArchiveDocument] = []
        try:
            for client in self._archive_clients:
                documents.extend(await client.get_documents(force=force))
        except Exception as e:
            self.logging.error("Loading documents failed: %s", e)
            self._load_error = str(e) or DEFAULT_LOAD_ERROR
            self._loaded = True
            return
        self.set_documents(documents)

    def set_documents(self, documents: Iterable[ArchiveDocument]) -> None:
        """Replace the collection and invalidate every memoized value."""
        self._documents = tuple(documents)
        self._version += 1
        self._loaded = True
        self._load_error = None
        self.logging.info("Search collection ready: %d documents (version %d)", len(self._documents), self._version, color="green")

    ##########################################
    ################ GETTER ##################
    ##########################################

    def get_documents(self) -> tuple[ArchiveDocument, ...]:
        return self._documents

    def is_loaded(self) -> bool:
        return self._loaded

    def get_load_error(self) -> str | None:
        return self._load_error

    def get_facets(self) -> Facets:
        if self._facets_cache is None or self._facets_cache[0] != self._version:
            self._facets_cache = (self._version, extract_facets(self._documents))
        return self._facets_cache[1]

    ##########################################
    ################ CORE ####################
    ##########################################

    def search(self, filters: SearchFilters) -> SearchResult:
        """Run the evaluator over the current collection.

        Args:
            filters (SearchFilters): The filter snapshot sent by the client.

        Returns:
            SearchResult: Matching documents in collection order and the elapsed time.
        """
        key = (self._version, filters)
        if self._result_cache is not None and self._result_cache[0] == key:
            return self._result_cache[1]

        result = search(self._documents, filters)
        self.logging.debug(
            "Search query=%r active_filters=%d -> %d of %d documents in %.2fms",
            filters.query[:80],
            filter_state.active_filter_count(filters),
            len(result.documents),
            len(self._documents),
            result.elapsed_ms,
        )
        self._result_cache = (key, result)
        return result

    def apply_filter_action(self, filters: SearchFilters, action: FilterAction) -> SearchFilters:
        """Apply one filter-state transition and return the new snapshot."""
        if action.type == "set_query":
            return filter_state.set_query(filters, action.value or "")
        if action.type == "toggle":
            if action.key is None or action.value is None:
                return filters
            return filter_state.toggle_set_filter(filters, action.key, action.value)
        if action.type == "set_year_range":
            return filter_state.set_year_range(filters, action.year_from, action.year_to)
        if action.type == "set_kdrive":
            return filter_state.set_kdrive_filter(filters, action.flag)
        if action.type == "clear_all":
            return filter_state.clear_all_filters()
        if action.type == "remove":
            return filter_state.remove_filter(filters, action.key or "", action.value)
        return filters

    def export_csv(self, filters: SearchFilters) -> tuple[str, str] | None:
        """Render the filtered documents as CSV.

        Returns:
            tuple[str, str] | None: (filename, csv text), or None when nothing matches.
        """
        documents = self.search(filters).documents
        if not documents:
            return None
        self.logging.info("Exporting %d documents to CSV", len(documents))
        return export_filename(len(documents)), build_csv(documents)
