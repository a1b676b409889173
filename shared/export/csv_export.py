"""CSV export of search results.

Columns follow the declaration order of :class:`ArchiveDocument` with the
archive's display names as headers. The file starts with a UTF-8 BOM so
spreadsheet tools pick up the encoding.
"""

from collections.abc import Sequence

from shared.models.document import ArchiveDocument

CSV_BOM = "\ufeff"
CSV_FIELDS: list[str] = list(ArchiveDocument.model_fields)
CSV_COLUMNS: list[str] = [ArchiveDocument.model_fields[name].alias or name for name in CSV_FIELDS]


def escape_csv_field(value) -> str:
    """Quote a value if it contains a comma, a double quote or a newline."""
    text = "" if value is None else str(value)
    if "," in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def build_csv(documents: Sequence[ArchiveDocument]) -> str:
    """Render documents as CSV text, BOM included.

    Args:
        documents (Sequence[ArchiveDocument]): Documents in the order they should appear.

    Returns:
        str: Header row plus one row per document, joined by newlines.
    """
    lines = [",".join(escape_csv_field(column) for column in CSV_COLUMNS)]
    for doc in documents:
        lines.append(",".join(escape_csv_field(getattr(doc, name)) for name in CSV_FIELDS))
    return CSV_BOM + "\n".join(lines)


def export_filename(count: int) -> str:
    return f"dnsa_colombia_{count}_docs.csv"
