from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from studyguide.mcp.settings import SETTINGS, Settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Settings]:
    """Ensure default values are set for Settings."""

    # Use pytest temp directory for content
    defaults = Settings(content_dir=tmp_path / "content")
    for name in Settings.model_fields:
        monkeypatch.setattr(SETTINGS, name, getattr(defaults, name))
    yield SETTINGS


@pytest.fixture
def override_setting(monkeypatch: pytest.MonkeyPatch) -> Iterator[Callable[[str, Any], None]]:
    """Function to override value for a setting."""

    def override(attr: str, value: Any) -> None:
        monkeypatch.setattr(SETTINGS, attr, value)

    yield override
