"""Query and filter evaluation over the in-memory document collection.

A document passes when it satisfies every active constraint of the
:class:`SearchFilters` snapshot. Matching documents keep their collection
order; nothing is ranked.
"""

import time
from collections.abc import Sequence

from shared.models.document import ArchiveDocument, parse_year
from shared.models.filters import PresenceFilter, SearchFilters
from shared.models.search import SearchResult

# a missing year counts as year 0 against a lower bound and never exceeds an upper bound
MISSING_YEAR_LOWER = 0


def query_terms(query: str) -> list[str]:
    """Lower-case the query and split it into whitespace-separated terms."""
    return query.lower().split()


def build_haystack(doc: ArchiveDocument) -> str:
    """Concatenate the searchable fields of a document into one lower-cased string."""
    fields = (
        doc.title,
        doc.subject,
        doc.people,
        doc.origin,
        doc.company_organization,
        doc.signator,
        doc.recipient,
        doc.document_note,
        doc.editorial_note,
        doc.notes,
        doc.accession_number,
    )
    return " ".join(field for field in fields if field).lower()


def matches_query(doc: ArchiveDocument, terms: Sequence[str]) -> bool:
    """True if every term occurs as a substring of the document's haystack."""
    if not terms:
        return True
    haystack = build_haystack(doc)
    return all(term in haystack for term in terms)


def matches_filters(doc: ArchiveDocument, filters: SearchFilters) -> bool:
    """True if the document satisfies every structured (non-text) filter."""
    if filters.document_types and doc.document_type not in filters.document_types:
        return False
    if filters.classifications and doc.classification not in filters.classifications:
        return False
    if filters.origins and doc.origin not in filters.origins:
        return False
    if filters.people and not any(person in filters.people for person in doc.people_list):
        return False

    if filters.year_from:
        lower = parse_year(filters.year_from)
        if lower is not None:
            year = doc.year_number
            if (MISSING_YEAR_LOWER if year is None else year) < lower:
                return False
    if filters.year_to:
        upper = parse_year(filters.year_to)
        if upper is not None:
            year = doc.year_number
            if year is not None and year > upper:
                return False

    if filters.has_kdrive_link is PresenceFilter.REQUIRED and not doc.has_file_link:
        return False
    if filters.has_kdrive_link is PresenceFilter.EXCLUDED and doc.has_file_link:
        return False
    return True


def search(documents: Sequence[ArchiveDocument], filters: SearchFilters) -> SearchResult:
    """Filter the collection with the given snapshot.

    Args:
        documents (Sequence[ArchiveDocument]): The full loaded collection.
        filters (SearchFilters): Query text and structured filters.

    Returns:
        SearchResult: Matching documents in collection order and the elapsed time in ms.
    """
    start = time.perf_counter()
    terms = query_terms(filters.query)
    matches = tuple(
        doc for doc in documents
        if matches_query(doc, terms) and matches_filters(doc, filters)
    )
    elapsed_ms = (time.perf_counter() - start) * 1000
    return SearchResult(documents=matches, elapsed_ms=elapsed_ms)
