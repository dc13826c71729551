# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Studyguide contributors
#

from pydantic import BaseModel, Field


class ParsedContent(BaseModel):
    """Title and body extracted from a document file."""

    title: str
    content: str


class Document(BaseModel):
    """A study guide document."""

    slug: str = Field(..., description="File name of the document, without extension")
    title: str = Field(..., description="Document title")
    content: str = Field(
        ...,
        description="Document body: raw Markdown for .md files, rendered HTML for .adoc files",
    )
    order: int = Field(..., description="Position of the document in the navigation sequence")


class DocSummary(BaseModel):
    """Short description of a document, for navigation."""

    slug: str = Field(..., description="Identifier to pass to docs_read")
    title: str = Field(..., description="Human-readable title of the document")
    overview: str | None = Field(default=None, description="First line of the overview section")
    sequence: str | None = Field(
        default=None, description="Sequence number from the file name, as written"
    )
    order: int = Field(..., description="Position of the document in the navigation sequence")


class DocsList(BaseModel):
    """Available documents, in reading order."""

    documents: list[DocSummary] = Field(..., description="All documents, in reading order")
    note: str = Field(..., description="Usage note about how to read these documents")
    recommended_start: str | None = Field(
        default=None, description="Slug of the first document of the guide"
    )
