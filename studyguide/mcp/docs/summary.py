import re

from .models import Document, DocSummary


_TITLE_PREFIX = re.compile(r"^[#\s\d-]+")
_OVERVIEW = re.compile(r"## Overview\s*([^\n]+)")
_SEQUENCE = re.compile(r"^(\d+)-")


def display_title(title: str) -> str:
    """Strip heading markers and numbering from the start of a title."""
    return _TITLE_PREFIX.sub("", title).strip()


def overview(content: str) -> str | None:
    """Return the first line of the "Overview" section of a Markdown body."""
    match = _OVERVIEW.search(content)
    if not match:
        return None
    return match.group(1).strip() or None


def sequence_number(slug: str) -> str | None:
    """Return the sequence number a slug starts with, as written (e.g. "01")."""
    match = _SEQUENCE.match(slug)
    return match.group(1) if match else None


def summarize(doc: Document) -> DocSummary:
    return DocSummary(
        slug=doc.slug,
        title=display_title(doc.title) or doc.slug,
        overview=overview(doc.content),
        sequence=sequence_number(doc.slug),
        order=doc.order,
    )
