from importlib import resources
from pathlib import Path
from typing import cast


def get_file_text(path: str) -> str:
    """Return the text of a file under the studyguide/mcp package."""
    # the Traversable is always a path in practice
    return cast(Path, resources.files("studyguide") / "mcp" / path).read_text()
