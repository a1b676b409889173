from pydantic import BaseModel, ConfigDict


class Facets(BaseModel):
    """Distinct values offered as filter options, derived from the loaded documents.

    Attributes:
        document_types:  Sorted distinct document types.
        classifications: Sorted distinct classification levels.
        origins:         Sorted distinct origins.
        people:          Sorted distinct people, split out of the semicolon-delimited field.
        years:           Distinct years in numeric order; non-numeric values last.
    """

    model_config = ConfigDict(frozen=True)

    document_types: list[str] = []
    classifications: list[str] = []
    origins: list[str] = []
    people: list[str] = []
    years: list[str] = []
