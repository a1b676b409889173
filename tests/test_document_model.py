from shared.models.document import ArchiveDocument, parse_year
from shared.search.highlight import highlight_segments


def test_null_and_numeric_values_are_normalized_to_strings():
    doc = ArchiveDocument(title=None, number_of_pages=12, year=1999, kdrive_file_id=None)
    assert doc.title == ""
    assert doc.number_of_pages == "12"
    assert doc.year == "1999"
    assert doc.kdrive_file_id is None
    assert doc.subject == ""


def test_display_aliases_are_accepted_and_dumped():
    doc = ArchiveDocument.model_validate({"Title": "Memo", "Company / organization": "CIA", "kDrive_FileID": 7})
    assert doc.title == "Memo"
    assert doc.company_organization == "CIA"
    dumped = doc.model_dump(by_alias=True)
    assert dumped["Company / organization"] == "CIA"
    assert dumped["kDrive_FileID"] == 7


def test_parse_year_uses_the_leading_integer():
    assert parse_year("1999") == 1999
    assert parse_year(" 1999-03-01") == 1999
    assert parse_year("") is None
    assert parse_year("n.d.") is None
    assert parse_year("\uff11\uff19\uff19\uff19") is None


def test_file_link_helpers():
    kdrive = ArchiveDocument(kdrive_public_link="https://kdrive.example/s/1")
    hosted = ArchiveDocument(kdrive_public_link="https://kdrive.example/s/1", supabase_url="https://files.example/1.pdf")
    bare = ArchiveDocument()

    assert kdrive.has_file_link and hosted.has_file_link and not bare.has_file_link
    assert kdrive.pdf_url == "https://kdrive.example/s/1"
    assert kdrive.pdf_download_url == "https://kdrive.example/s/1/download"
    assert hosted.pdf_url == hosted.pdf_download_url == "https://files.example/1.pdf"
    assert bare.pdf_download_url == ""


def test_citation_and_subjects():
    doc = ArchiveDocument(
        title="Plan Colombia Report",
        document_type="Report",
        date="1999-07-01",
        accession_number="CO0042",
        database="DNSA",
        subject="Narcotics; ;Aid ",
    )
    assert doc.citation == '"Plan Colombia Report," Report, 1999-07-01. CO0042. DNSA.'
    assert doc.subjects == ["Narcotics", "Aid"]


def test_highlight_marks_every_term_case_insensitively():
    segments = highlight_segments("Plan Colombia report on PLANning", "plan report")
    assert "".join(s.text for s in segments) == "Plan Colombia report on PLANning"
    assert [(s.text, s.matched) for s in segments] == [
        ("Plan", True),
        (" Colombia ", False),
        ("report", True),
        (" on ", False),
        ("PLAN", True),
        ("ning", False),
    ]


def test_highlight_escapes_regex_characters_and_handles_empty_query():
    assert [s.matched for s in highlight_segments("Costs (USD)", "(usd)")] == [False, True]
    assert [(s.text, s.matched) for s in highlight_segments("Memo", "   ")] == [("Memo", False)]


def test_presentation_helpers_are_serialized():
    doc = ArchiveDocument(title="Memo", subject="Aid; Trade", kdrive_public_link="https://kdrive.example/s/2")
    dumped = doc.model_dump(by_alias=True)
    assert dumped["subjects"] == ["Aid", "Trade"]
    assert dumped["pdf_url"] == "https://kdrive.example/s/2"
    assert dumped["pdf_download_url"] == "https://kdrive.example/s/2/download"
    assert dumped["citation"].startswith('"Memo,"')
    assert ArchiveDocument.model_validate(dumped) == doc
