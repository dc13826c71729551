# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2026 Studyguide contributors
#

"""
Parsers for the supported document formats.

Each parser turns the text of a document file into a title and a body. The
title falls back to the document slug when the file doesn't declare one.
"""

import io
import re

from pathlib import PurePath

import frontmatter
import yaml

from asciidoc.api import AsciiDocAPI, AsciiDocError

from .models import ParsedContent


class ParseError(ValueError):
    """A document file could not be parsed."""


class DocumentParser:
    """Base class for document parsers."""

    # file extension handled by the parser
    extension: str

    def parse(self, slug: str, text: str) -> ParsedContent:
        raise NotImplementedError


class MarkdownParser(DocumentParser):
    """Markdown documents, with an optional front-matter block.

    Front-matter is YAML between `---` lines, or any other format detected by
    python-frontmatter (JSON, TOML).

    The body is returned as raw Markdown.
    """

    extension = ".md"

    def parse(self, slug: str, text: str) -> ParsedContent:
        try:
            post = frontmatter.loads(text)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            raise ParseError(f"Invalid front-matter in {slug}: {e}") from e

        title = post.metadata.get("title")
        return ParsedContent(
            title=str(title) if title else slug,
            content=post.content,
        )


_COMMENT_BLOCK = "////"
_ATTRIBUTE_ENTRY = re.compile(r"^:(?P<name>!?\w[\w-]*!?):(?:\s+(?P<value>.*?))?\s*$")
_DOCUMENT_TITLE = re.compile(r"^=\s+(?P<title>\S.*?)\s*$")
_ATTRIBUTE_REFERENCE = re.compile(r"\{(?P<name>\w[\w-]*)\}")


def asciidoc_title(text: str) -> str | None:
    """Return the title declared in the header of an AsciiDoc document.

    The title is the level-0 heading (``= Title``) on the first content line,
    which can be preceded by comments and attribute entries. A ``:doctitle:``
    attribute entry is used when there's no such heading.
    """
    attributes: dict[str, str] = {}
    in_comment = False
    title = None
    for line in text.splitlines():
        stripped = line.strip()
        if stripped == _COMMENT_BLOCK:
            in_comment = not in_comment
            continue
        if in_comment or not stripped or stripped.startswith("//"):
            continue
        if entry := _ATTRIBUTE_ENTRY.match(stripped):
            attributes[entry["name"]] = entry["value"] or ""
            continue
        if match := _DOCUMENT_TITLE.match(stripped):
            title = match["title"]
        break

    if title is None:
        title = attributes.get("doctitle") or None
    if title is None:
        return None
    return _ATTRIBUTE_REFERENCE.sub(
        lambda ref: attributes.get(ref["name"], ref.group(0)),
        title,
    )


class AsciiDocParser(DocumentParser):
    """AsciiDoc documents.

    The body is rendered to an HTML fragment, without the document header and
    footer.
    """

    extension = ".adoc"

    def __init__(self, backend: str = "html5"):
        self.backend = backend

    def parse(self, slug: str, text: str) -> ParsedContent:
        return ParsedContent(
            title=asciidoc_title(text) or slug,
            content=self.convert(slug, text),
        )

    def convert(self, slug: str, text: str) -> str:
        api = AsciiDocAPI()
        api.options("--no-header-footer")
        # no system macros, no includes
        api.options("--safe")
        infile = io.StringIO(text)
        outfile = io.StringIO()
        try:
            api.execute(infile, outfile, backend=self.backend)
        except AsciiDocError as e:
            raise ParseError(f"Failed to convert {slug}: {e}") from e
        return outfile.getvalue()


def default_parsers(asciidoc_backend: str = "html5") -> dict[str, DocumentParser]:
    """Parsers for the supported formats, by file extension."""
    parsers: list[DocumentParser] = [MarkdownParser(), AsciiDocParser(backend=asciidoc_backend)]
    return {parser.extension: parser for parser in parsers}


def parser_for(
    file_name: str, parsers: dict[str, DocumentParser] | None = None
) -> DocumentParser | None:
    """Return the parser for a file, based on its extension, or None if not supported."""
    if parsers is None:
        parsers = default_parsers()
    return parsers.get(PurePath(file_name).suffix)
