# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Studyguide contributors
#

"""
Loading of documents from a content source.
"""

import re

from pathlib import PurePath
from typing import Self, cast

from fastmcp import Context
from fastmcp.utilities.logging import get_logger

from ..lifespan import server_cached
from ..settings import SETTINGS
from .models import Document
from .parsers import DocumentParser, ParseError, default_parsers, parser_for
from .sources import ContentSource, DirectorySource


# order for documents whose name doesn't start with a number
DEFAULT_ORDER = 999

_ORDER_PREFIX = re.compile(r"^\d+")

logger = get_logger("studyguide")


def order_key(slug: str) -> int:
    """Return the position of a document from the number its slug starts with."""
    match = _ORDER_PREFIX.match(slug)
    return int(match.group(0)) if match else DEFAULT_ORDER


class ContentLoader:
    """Load documents from a content source.

    Nothing is cached, each call reads from the source again.
    """

    def __init__(
        self,
        source: ContentSource,
        parsers: dict[str, DocumentParser] | None = None,
    ):
        self.source = source
        self.parsers = default_parsers() if parsers is None else parsers

    @classmethod
    def get(cls, ctx: Context) -> Self:
        return cast(Self, server_cached(ctx, "CONTENT_LOADER", cls.from_settings))

    @classmethod
    def from_settings(cls) -> Self:
        """Create a loader for the configured content directory."""
        return cls(
            DirectorySource(SETTINGS.content_dir),
            parsers=default_parsers(asciidoc_backend=SETTINGS.asciidoc_backend),
        )

    def list_all(self) -> list[Document]:
        """Return all documents, sorted by their order.

        Files in unsupported formats are skipped. Errors reading or parsing
        files are propagated.
        """
        docs = []
        for name in self.source.list_names():
            if self._parser(name) is None:
                logger.debug(f"Skipping unsupported content file: {name}")
                continue
            docs.append(self._load(name))
        return sorted(docs, key=lambda doc: doc.order)

    def get_by_slug(self, slug: str) -> Document | None:
        """Return the document for a slug.

        The first file whose name starts with the slug is used, unless one
        matches it exactly. None is returned if no file matches, or if the
        file can't be read.
        """
        try:
            name = self._find(slug)
            if name is None:
                return None
            return self._load(name)
        except (OSError, UnicodeDecodeError, ParseError):
            logger.exception(f"Error getting document by slug: {slug}")
            return None

    def _find(self, slug: str) -> str | None:
        names = [name for name in self.source.list_names() if self._parser(name) is not None]
        for name in names:
            if PurePath(name).stem == slug:
                return name
        return next((name for name in names if name.startswith(slug)), None)

    def _load(self, name: str) -> Document:
        parser = cast(DocumentParser, self._parser(name))
        slug = PurePath(name).stem
        parsed = parser.parse(slug, self.source.read_text(name))
        return Document(
            slug=slug,
            title=parsed.title,
            content=parsed.content,
            order=order_key(slug),
        )

    def _parser(self, name: str) -> DocumentParser | None:
        return parser_for(name, self.parsers)
