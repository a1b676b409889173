from typing import Literal

from pydantic import BaseModel, Field

from shared.models.filters import EMPTY_FILTERS, SearchFilters


class SearchRequest(BaseModel):
    filters: SearchFilters = EMPTY_FILTERS
    offset: int = Field(default=0, ge=0)
    limit: int | None = Field(default=None, ge=1)


class FilterAction(BaseModel):
    """One filter-state transition, as sent by the filter sidebar or the active-filters bar.

    Attributes:
        type:      Which transition to apply.
        key:       Facet key for "toggle"; any active-filter key for "remove".
        value:     Query text for "set_query"; facet value for "toggle" and "remove".
        year_from: Lower bound for "set_year_range".
        year_to:   Upper bound for "set_year_range".
        flag:      Presence flag for "set_kdrive" (true / false / null).
    """

    type: Literal["set_query", "toggle", "set_year_range", "set_kdrive", "clear_all", "remove"]
    key: str | None = None
    value: str | None = None
    year_from: str = ""
    year_to: str = ""
    flag: bool | None = None


class FilterActionRequest(BaseModel):
    filters: SearchFilters = EMPTY_FILTERS
    action: FilterAction
