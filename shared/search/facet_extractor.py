"""Facet extraction.

Scans the whole document collection once per load and returns the distinct
values offered by the filter sidebar. Sorting is by code point, so values that
differ only in case ("Secret" / "secret") stay separate entries.
"""

from collections.abc import Callable, Iterable

from shared.models.document import ArchiveDocument, parse_year, split_semicolon_list
from shared.models.facets import Facets


def extract_unique(documents: Iterable[ArchiveDocument], getter: Callable[[ArchiveDocument], str]) -> list[str]:
    """Collect the distinct non-empty values of one field, sorted ascending.

    Args:
        documents (Iterable[ArchiveDocument]): The loaded collection.
        getter (Callable[[ArchiveDocument], str]): Reads the field from a document.

    Returns:
        list[str]: Distinct values in code-point order.
    """
    values = {getter(doc) for doc in documents}
    values.discard("")
    return sorted(values)


def extract_people(documents: Iterable[ArchiveDocument]) -> list[str]:
    """Collect every distinct person named in the semicolon-delimited People field."""
    people: set[str] = set()
    for doc in documents:
        people.update(split_semicolon_list(doc.people))
    return sorted(people)


def sort_years(years: Iterable[str]) -> list[str]:
    """Sort year strings numerically; values without a leading integer go last.

    The input is sorted by code point first so the unparseable tail has a
    deterministic order.
    """

    def _key(year: str) -> tuple[int, int]:
        number = parse_year(year)
        return (1, 0) if number is None else (0, number)

    return sorted(sorted(years), key=_key)


def extract_facets(documents: Iterable[ArchiveDocument]) -> Facets:
    """Derive all facet vocabularies from the document collection.

    Args:
        documents (Iterable[ArchiveDocument]): The loaded collection.

    Returns:
        Facets: Sorted distinct values per filterable field.
    """
    documents = list(documents)
    return Facets(
        document_types=extract_unique(documents, lambda d: d.document_type),
        classifications=extract_unique(documents, lambda d: d.classification),
        origins=extract_unique(documents, lambda d: d.origin),
        people=extract_people(documents),
        years=sort_years(extract_unique(documents, lambda d: d.year)),
    )
