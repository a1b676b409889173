from shared.export.csv_export import CSV_BOM, CSV_COLUMNS, build_csv, escape_csv_field, export_filename
from shared.models.document import ArchiveDocument


def test_column_order_uses_display_names():
    assert CSV_COLUMNS[:6] == ["Title", "Subject", "People", "Classification", "Company / organization", "Origin"]
    assert CSV_COLUMNS[-2:] == ["URL", "supabase_url"]
    assert len(CSV_COLUMNS) == 30


def test_escaping_rule():
    assert escape_csv_field("plain") == "plain"
    assert escape_csv_field("a, b") == '"a, b"'
    assert escape_csv_field('say "hi"') == '"say ""hi"""'
    assert escape_csv_field("line\nbreak") == '"line\nbreak"'
    assert escape_csv_field(None) == ""
    assert escape_csv_field(42) == "42"


def test_build_csv_has_bom_header_and_rows():
    docs = [
        ArchiveDocument(title="Memo, urgent", people="Alice; Bob", kdrive_file_id=5),
        ArchiveDocument(title="Cable"),
    ]
    content = build_csv(docs)
    assert content.startswith(CSV_BOM)

    lines = content[len(CSV_BOM):].split("\n")
    assert len(lines) == 3
    assert lines[0].startswith("Title,Subject,People,Classification,")
    assert lines[1].startswith('"Memo, urgent",,Alice; Bob,')
    assert lines[2].startswith("Cable,,,")
    assert len(lines[2].split(",")) == len(CSV_COLUMNS)


def test_export_filename_embeds_the_count():
    assert export_filename(17) == "dnsa_colombia_17_docs.csv"
