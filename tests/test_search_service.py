from server.core.SearchService import SearchService
from server.models.requests import FilterAction
from shared.models.document import ArchiveDocument
from shared.models.filters import EMPTY_FILTERS, SearchFilters


def test_facets_are_recomputed_only_when_documents_change(helper_config, plan_colombia_docs):
    service = SearchService(helper_config=helper_config, archive_clients=[])
    service.set_documents(plan_colombia_docs)

    facets = service.get_facets()
    assert service.get_facets() is facets

    service.set_documents([*plan_colombia_docs, ArchiveDocument(title="New", classification="Confidential")])
    assert service.get_facets() is not facets
    assert service.get_facets().classifications == ["Confidential", "Secret", "Unclassified"]


def test_latest_result_is_memoized_per_filters_and_version(helper_config, plan_colombia_docs):
    service = SearchService(helper_config=helper_config, archive_clients=[])
    service.set_documents(plan_colombia_docs)

    first = service.search(SearchFilters(query="plan"))
    assert service.search(SearchFilters(query="plan")) is first
    assert service.search(SearchFilters(query="memo")) is not first

    service.set_documents(plan_colombia_docs)
    assert service.search(SearchFilters(query="plan")) is not first


def test_apply_filter_action_dispatches_transitions(helper_config):
    service = SearchService(helper_config=helper_config, archive_clients=[])

    filters = service.apply_filter_action(EMPTY_FILTERS, FilterAction(type="set_query", value="plan"))
    assert filters.query == "plan"
    filters = service.apply_filter_action(filters, FilterAction(type="toggle", key="origins", value="Bogota"))
    assert filters.origins == {"Bogota"}
    filters = service.apply_filter_action(filters, FilterAction(type="set_kdrive", flag=True))
    assert filters.has_kdrive_link.as_flag() is True
    filters = service.apply_filter_action(filters, FilterAction(type="remove", key="origins", value="Bogota"))
    assert filters.origins == frozenset()
    assert service.apply_filter_action(filters, FilterAction(type="toggle", key="origins")) == filters
    assert service.apply_filter_action(filters, FilterAction(type="clear_all")) == EMPTY_FILTERS


def test_export_returns_none_for_empty_results(helper_config, plan_colombia_docs):
    service = SearchService(helper_config=helper_config, archive_clients=[])
    service.set_documents(plan_colombia_docs)
    assert service.export_csv(SearchFilters(query="nothing")) is None
    filename, content = service.export_csv(EMPTY_FILTERS)
    assert filename == "dnsa_colombia_2_docs.csv"
    assert content.count("\n") == 2
