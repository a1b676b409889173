"""State transitions over :class:`SearchFilters`.

Every function returns a new filters value and leaves its input untouched, so
a filters object can always be treated as a snapshot.
"""

from shared.models.filters import EMPTY_FILTERS, SET_FACET_KEYS, PresenceFilter, SearchFilters
from shared.models.search import ActiveFilterChip

CHIP_PREFIXES: dict[str, str] = {
    "document_types": "Tipo",
    "classifications": "Clasif.",
    "origins": "Origen",
    "people": "Persona",
    "year_range": "Año",
    "kdrive_link": "PDF",
}


def set_query(filters: SearchFilters, text: str) -> SearchFilters:
    """Replace the query verbatim; normalization happens at evaluation time."""
    return filters.model_copy(update={"query": text})


def toggle_set_filter(filters: SearchFilters, facet_key: str, value: str) -> SearchFilters:
    """Add ``value`` to the facet set if absent, remove it if present.

    An unknown facet key returns the filters unchanged.
    """
    if facet_key not in SET_FACET_KEYS:
        return filters
    current: frozenset[str] = getattr(filters, facet_key)
    return filters.model_copy(update={facet_key: current ^ {value}})


def set_year_range(filters: SearchFilters, year_from: str, year_to: str) -> SearchFilters:
    """Replace both year bounds at once. Pass the current value to keep one side."""
    return filters.model_copy(update={"year_from": year_from or "", "year_to": year_to or ""})


def set_kdrive_filter(filters: SearchFilters, value: PresenceFilter | bool | None) -> SearchFilters:
    return filters.model_copy(update={"has_kdrive_link": PresenceFilter.from_flag(value)})


def clear_all_filters() -> SearchFilters:
    """Reset everything, query included."""
    return EMPTY_FILTERS


def remove_filter(filters: SearchFilters, key: str, value: str | None = None) -> SearchFilters:
    """Remove one entry shown in the active-filters bar.

    Args:
        filters (SearchFilters): Current filter state.
        key (str): A facet key, "year_range", "kdrive_link" or "query".
        value (str | None): The facet value to drop; ignored for the other keys.

    Returns:
        SearchFilters: The updated state. Unknown keys and absent values are no-ops.
    """
    if key == "query":
        return filters.model_copy(update={"query": ""})
    if key == "year_range":
        return filters.model_copy(update={"year_from": "", "year_to": ""})
    if key == "kdrive_link":
        return filters.model_copy(update={"has_kdrive_link": PresenceFilter.UNCONSTRAINED})
    if key in SET_FACET_KEYS:
        current: frozenset[str] = getattr(filters, key)
        if value is None or value not in current:
            return filters
        return filters.model_copy(update={key: current - {value}})
    return filters


def active_filter_count(filters: SearchFilters) -> int:
    """Number of structured filters in effect. The free-text query is not counted."""
    count = sum(len(getattr(filters, key)) for key in SET_FACET_KEYS)
    if filters.year_from or filters.year_to:
        count += 1
    if filters.has_kdrive_link is not PresenceFilter.UNCONSTRAINED:
        count += 1
    return count


def active_filter_chips(filters: SearchFilters) -> list[ActiveFilterChip]:
    """Build the removable entries of the active-filters bar, one per structured filter."""
    chips: list[ActiveFilterChip] = []
    for key in SET_FACET_KEYS:
        for value in sorted(getattr(filters, key)):
            chips.append(ActiveFilterChip(key=key, value=value, label=value, prefix=CHIP_PREFIXES[key]))

    if filters.year_from or filters.year_to:
        label = f"{filters.year_from or '...'}–{filters.year_to or '...'}"
        chips.append(ActiveFilterChip(key="year_range", label=label, prefix=CHIP_PREFIXES["year_range"]))

    if filters.has_kdrive_link is not PresenceFilter.UNCONSTRAINED:
        label = "Con archivo" if filters.has_kdrive_link is PresenceFilter.REQUIRED else "Sin archivo"
        chips.append(ActiveFilterChip(key="kdrive_link", label=label, prefix=CHIP_PREFIXES["kdrive_link"]))
    return chips
