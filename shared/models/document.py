"""Pydantic models for archive documents.

Hierarchy:
  ArchiveDocument: one catalog record of the declassified-documents archive.
  RelatedDocument: the short form listed next to a graph node.

Python attribute names are snake_case; the aliases are the archive's display
column names, used on the wire and as CSV headers.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def split_semicolon_list(value: str) -> list[str]:
    """Split a semicolon-delimited field into trimmed, non-empty tokens.

    Args:
        value (str): Raw field value, e.g. "Alice; Bob ;Carol".

    Returns:
        list[str]: Tokens in their original order, e.g. ["Alice", "Bob", "Carol"].
    """
    return [token.strip() for token in value.split(";") if token.strip()]


def parse_year(value: str) -> int | None:
    """Parse the leading base-10 integer of a year string.

    "1999" and "1999-03" both give 1999; "", "n.d." and "[1990?]" give None.
    """
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


class ArchiveDocument(BaseModel):
    """A single catalog record.

    Every text field defaults to an empty string and inbound ``None`` values are
    normalized to ``""`` so membership and substring tests never need a null check.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", alias="Title")
    subject: str = Field(default="", alias="Subject")
    people: str = Field(default="", alias="People")
    classification: str = Field(default="", alias="Classification")
    company_organization: str = Field(default="", alias="Company / organization")
    origin: str = Field(default="", alias="Origin")
    signator: str = Field(default="", alias="Signator")
    recipient: str = Field(default="", alias="Recipient")
    number_of_pages: str = Field(default="", alias="Number of pages")
    date: str = Field(default="", alias="Date")
    year: str = Field(default="", alias="Year")
    dnsa_collection: str = Field(default="", alias="DNSA collection")
    source_type: str = Field(default="", alias="Source type")
    language_of_publication: str = Field(default="", alias="Language of publication")
    document_type: str = Field(default="", alias="Document type")
    document_note: str = Field(default="", alias="Document note")
    document_number: str = Field(default="", alias="Document number")
    accession_number: str = Field(default="", alias="Accession number")
    proquest_document_id: str = Field(default="", alias="ProQuest document ID")
    document_url: str = Field(default="", alias="Document URL")
    last_updated: str = Field(default="", alias="Last updated")
    database: str = Field(default="", alias="Database")
    proquest_url: str = Field(default="", alias="ProQuest_URL")
    kdrive_file_id: int | None = Field(default=None, alias="kDrive_FileID")
    kdrive_public_link: str = Field(default="", alias="kDrive_Public_Link")
    editorial_note: str = Field(default="", alias="Editorial note")
    notes: str = Field(default="", alias="Notes")
    publication_note: str = Field(default="", alias="Publication note")
    url: str = Field(default="", alias="URL")
    supabase_url: str = Field(default="", alias="supabase_url")

    @field_validator("*", mode="before")
    @classmethod
    def _normalize_text(cls, value, info):
        if info.field_name == "kdrive_file_id":
            return value
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    ##########################################
    ############### HELPERS ##################
    ##########################################

    @property
    def people_list(self) -> list[str]:
        return split_semicolon_list(self.people)

    @computed_field
    @property
    def subjects(self) -> list[str]:
        return split_semicolon_list(self.subject)

    @property
    def year_number(self) -> int | None:
        return parse_year(self.year)

    @property
    def has_file_link(self) -> bool:
        """True if either the hosted file or the kDrive public link is set."""
        return bool(self.kdrive_public_link or self.supabase_url)

    @computed_field
    @property
    def pdf_url(self) -> str:
        """URL used to display the PDF; the hosted copy wins over kDrive."""
        return self.supabase_url or self.kdrive_public_link

    @computed_field
    @property
    def pdf_download_url(self) -> str:
        """Direct download URL. kDrive share links need the ``/download`` suffix."""
        if self.supabase_url:
            return self.supabase_url
        if self.kdrive_public_link:
            return f"{self.kdrive_public_link}/download"
        return ""

    @computed_field
    @property
    def citation(self) -> str:
        return f'"{self.title}," {self.document_type}, {self.date}. {self.accession_number}. {self.database}.'


class RelatedDocument(BaseModel):
    """Short document reference shown in the detail panel of a graph node."""

    id: str
    title: str = ""
    year: str = ""
    classification: str = ""

    @field_validator("id", "title", "year", "classification", mode="before")
    @classmethod
    def _normalize_text(cls, value):
        return "" if value is None else str(value)
