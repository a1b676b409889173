import httpx

from shared.clients.archive.ArchiveClientInterface import ArchiveClientInterface
from shared.helper.HelperConfig import HelperConfig
from shared.models.config import EnvConfig
from shared.models.document import ArchiveDocument, RelatedDocument
from shared.models.graph import GraphLink, GraphNode

RELATED_DOCUMENTS_LIMIT = 20
UNTITLED_DOCUMENT = "Sin titulo"


class ArchiveClientSupabase(ArchiveClientInterface):
    """Reads the archive tables through the Supabase (PostgREST) REST API."""

    def __init__(self, helper_config: HelperConfig):
        super().__init__(helper_config=helper_config)
        self._base_url = self.get_config_val("BASE_URL", default=None, val_type="string")
        self._api_key = self.get_config_val("API_KEY", default="", val_type="string")
        self._page_size = int(self.get_config_val("PAGE_SIZE", default=1000, val_type="number"))
        self._table_documents = self.get_config_val("DOCUMENTS_TABLE", default="scrap_documents", val_type="string")
        self._table_nodes = self.get_config_val("NODES_TABLE", default="scrap_nodes", val_type="string")
        self._table_links = self.get_config_val("LINKS_TABLE", default="scrap_links", val_type="string")
        self._table_document_nodes = self.get_config_val("DOCUMENT_NODES_TABLE", default="scrap_document_nodes", val_type="string")

    ##########################################
    ################ GETTER ##################
    ##########################################

    ################ GENERAL ##################
    def _get_engine_name(self) -> str:
        return "Supabase"

    def _get_page_size(self) -> int:
        return self._page_size

    ################ CONFIG ##################
    def _get_required_config(self) -> list[EnvConfig]:
        return [
            EnvConfig(env_key="BASE_URL", val_type="string", default=None),
            EnvConfig(env_key="API_KEY", val_type="string", default=""),
            EnvConfig(env_key="PAGE_SIZE", val_type="number", default=1000),
        ]

    ################ AUTH ##################
    def _get_auth_header(self) -> dict:
        if self._api_key:
            return {"apikey": self._api_key, "Authorization": f"Bearer {self._api_key}"}
        return {}

    ################ ENDPOINTS ##################
    def _get_base_url(self) -> str:
        return self._base_url

    def _get_endpoint_healthcheck(self) -> str:
        return "/rest/v1/"

    def _get_endpoint_documents(self) -> str:
        return f"/rest/v1/{self._table_documents}"

    def _get_endpoint_nodes(self) -> str:
        return f"/rest/v1/{self._table_nodes}"

    def _get_endpoint_links(self) -> str:
        return f"/rest/v1/{self._table_links}"

    def _get_endpoint_document_nodes(self) -> str:
        return f"/rest/v1/{self._table_document_nodes}"

    ################ PARAMS ##################
    def _get_params_documents(self, offset: int, limit: int) -> dict:
        # id as tie-breaker keeps pages stable between requests
        return {"select": "*", "order": "year.desc,id.asc", "offset": offset, "limit": limit}

    def _get_params_listing(self, offset: int, limit: int) -> dict:
        return {"select": "*", "offset": offset, "limit": limit}

    def _get_params_document_ids_for_node(self, node_id: str) -> dict:
        return {"select": "document_id", "node_id": f"eq.{node_id}"}

    def _get_params_documents_by_ids(self, document_ids: list[str]) -> dict:
        quoted = ",".join(f'"{document_id}"' for document_id in document_ids)
        return {"select": "id,title,year,classification", "id": f"in.({quoted})", "limit": RELATED_DOCUMENTS_LIMIT}

    ##########################################
    ########### RESPONSE PARSER ##############
    ##########################################

    def _parse_listing(self, response: httpx.Response) -> list[dict]:
        body = response.json()
        if not isinstance(body, list):
            raise Exception(f"Unexpected listing response from {self._get_engine_name()}: {str(body)[:200]}")
        return body

    def _parse_document_row(self, row: dict) -> ArchiveDocument:
        # columns missing from the table are left empty
        return ArchiveDocument(
            title=row.get("title"),
            subject=row.get("subject"),
            people=row.get("people"),
            classification=row.get("classification"),
            company_organization=row.get("company_organization"),
            origin=row.get("origin"),
            signator=row.get("signator"),
            recipient=row.get("recipient"),
            number_of_pages=row.get("number_of_pages"),
            date=row.get("date"),
            year=row.get("year"),
            language_of_publication=row.get("language"),
            document_type=row.get("document_type"),
            document_note=row.get("document_note"),
            document_number=row.get("document_number"),
            accession_number=row.get("accession_number"),
            proquest_document_id=row.get("proquest_id"),
            document_url=row.get("document_url"),
            proquest_url=row.get("proquest_url"),
            kdrive_file_id=row.get("kdrive_file_id"),
            kdrive_public_link=row.get("kdrive_public_link"),
            editorial_note=row.get("editorial_note"),
            notes=row.get("notes"),
            publication_note=row.get("publication_note"),
            url=row.get("document_url"),
            supabase_url=row.get("supabase_url"),
        )

    def _parse_node_row(self, row: dict) -> GraphNode:
        return GraphNode(
            id=str(row.get("id")),
            name=row.get("name") or "",
            group=row.get("type") or "",
            val=row.get("val") or 1,
        )

    def _parse_link_row(self, row: dict) -> GraphLink:
        return GraphLink(
            source=str(row.get("source")),
            target=str(row.get("target")),
            value=row.get("strength") or 1,
        )

    def _parse_related_document_row(self, row: dict) -> RelatedDocument:
        return RelatedDocument(
            id=row.get("id"),
            title=row.get("title") or UNTITLED_DOCUMENT,
            year=row.get("year"),
            classification=row.get("classification"),
        )

    def _parse_document_node_row(self, row: dict) -> str:
        return str(row.get("document_id"))
