from typing import Annotated, Any, Callable

from fastmcp import Context
from pydantic import Field

from ..utils.error import annotated_error
from .loader import ContentLoader
from .models import Document, DocsList
from .summary import summarize


def tools() -> list[Callable[..., Any]]:
    """List of available Documentation tools."""
    return [
        docs_list,
        docs_read,
    ]


def docs_list(ctx: Context) -> DocsList:
    """
    Browse the study guide documents, in reading order.

    Each document has a slug, a title, its sequence number in the guide and,
    when available, a one-line overview.

    Use docs_read() with any of the returned slugs to get the actual content.
    """
    loader = ContentLoader.get(ctx)
    documents = [summarize(doc) for doc in loader.list_all()]
    return DocsList(
        documents=documents,
        note="Use docs_read with any of these slugs to read the content",
        recommended_start=documents[0].slug if documents else None,
    )


def docs_read(
    ctx: Context,
    slug: Annotated[
        str,
        Field(
            min_length=1,
            description="Slug of the document to read (e.g., '01-introduction')",
        ),
    ],
) -> Document:
    """
    Read a study guide document.

    The content of Markdown documents is returned as Markdown, the content of
    AsciiDoc documents as HTML.

    Recommended reading order:
    1. Call docs_list to get the documents in the guide
    2. Start from the first document and follow the sequence
    """
    loader = ContentLoader.get(ctx)
    doc = loader.get_by_slug(slug)
    if doc is None:
        raise annotated_error(
            problem=f"No document found for slug '{slug}'",
            likely_cause="the slug is misspelled or the document was removed",
            next_steps="call docs_list to get the available slugs",
        )
    return doc
