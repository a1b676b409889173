import logging

import pytest

from shared.helper.HelperConfig import HelperConfig
from shared.logging.logging_setup import ColorLogger
from shared.models.document import ArchiveDocument


@pytest.fixture
def logger() -> ColorLogger:
    return ColorLogger(logging.getLogger("archive_explorer.tests"))


@pytest.fixture
def helper_config(logger) -> HelperConfig:
    return HelperConfig(logger=logger)


@pytest.fixture
def plan_colombia_docs() -> list[ArchiveDocument]:
    return [
        ArchiveDocument(
            title="Plan Colombia Report",
            year="1999",
            classification="Secret",
            people="John Doe; Jane Roe",
        ),
        ArchiveDocument(
            title="Trade Memo",
            year="2001",
            classification="Unclassified",
            people="",
        ),
    ]


@pytest.fixture
def archive_docs() -> list[ArchiveDocument]:
    return [
        ArchiveDocument(
            title="Cable on coca eradication in Putumayo",
            subject="Narcotics; Eradication",
            people="Alice; Bob ;Carol",
            classification="Confidential",
            origin="Bogota",
            document_type="Cable",
            year="1998",
            accession_number="CO00123",
            kdrive_public_link="https://kdrive.example/s/abc",
        ),
        ArchiveDocument(
            title="Memorandum for the Secretary",
            subject="Human rights",
            people="Bob",
            classification="Secret",
            origin="Washington",
            document_type="Memorandum",
            year="2003",
            signator="Carol",
            supabase_url="https://files.example/doc2.pdf",
        ),
        ArchiveDocument(
            title="Undated intelligence note",
            people="Dave",
            classification="secret",
            origin="Bogota",
            document_type="Cable",
            year="",
            editorial_note="Date excised by the originating agency",
        ),
        ArchiveDocument(
            title="Embassy report on peace talks",
            subject="Peace process",
            classification="Unclassified",
            origin="Bogota",
            document_type="Report",
            year="9",
            notes="Misfiled year",
        ),
    ]
