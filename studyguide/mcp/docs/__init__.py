"""
Loading of the study guide documents from the content directory.
"""

from .loader import DEFAULT_ORDER, ContentLoader, order_key
from .models import Document, DocSummary, DocsList
from .parsers import AsciiDocParser, MarkdownParser, ParseError, parser_for
from .sources import ContentSource, DirectorySource


__all__ = [
    "DEFAULT_ORDER",
    "AsciiDocParser",
    "ContentLoader",
    "ContentSource",
    "DirectorySource",
    "DocSummary",
    "DocsList",
    "Document",
    "MarkdownParser",
    "ParseError",
    "order_key",
    "parser_for",
]
