import pytest

from studyguide.mcp.docs.models import Document
from studyguide.mcp.docs.summary import display_title, overview, sequence_number, summarize


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Introduction", "Introduction"),
        ("01 - Introduction", "Introduction"),
        ("# 3 Validation", "Validation"),
        ("  12-Testing  ", "Testing"),
        ("Spring Boot 3 features", "Spring Boot 3 features"),
        ("2024", ""),
    ],
)
def test_display_title(title, expected):
    assert display_title(title) == expected


class TestOverview:
    def test_overview(self):
        content = "# Intro\n\n## Overview\nWhat the guide covers.\n\nMore.\n"
        assert overview(content) == "What the guide covers."

    def test_overview_after_blank_lines(self):
        content = "## Overview\n\n\n   What the guide covers.  \n"
        assert overview(content) == "What the guide covers."

    def test_no_overview(self):
        assert overview("# Intro\n\nSome text.\n") is None


@pytest.mark.parametrize(
    "slug,expected",
    [
        ("01-introduction", "01"),
        ("12-testing", "12"),
        ("introduction", None),
        ("2024", None),
    ],
)
def test_sequence_number(slug, expected):
    assert sequence_number(slug) == expected


class TestSummarize:
    def test_summarize(self):
        doc = Document(
            slug="01-introduction",
            title="01 - Introduction",
            content="## Overview\nWhat the guide covers.\n",
            order=1,
        )
        summary = summarize(doc)
        assert summary.slug == "01-introduction"
        assert summary.title == "Introduction"
        assert summary.overview == "What the guide covers."
        assert summary.sequence == "01"
        assert summary.order == 1

    def test_summarize_title_fallback(self):
        doc = Document(slug="2024", title="2024", content="", order=2024)
        summary = summarize(doc)
        assert summary.title == "2024"
        assert summary.overview is None
        assert summary.sequence is None
