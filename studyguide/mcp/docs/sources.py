from pathlib import Path, PurePath
from typing import Protocol


class ContentSource(Protocol):
    """Where document files are read from."""

    def list_names(self) -> list[str]: ...

    def read_text(self, name: str) -> str: ...


class DirectorySource:
    """Document files in a directory on disk."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def list_names(self) -> list[str]:
        """Return names of the files in the directory, sorted.

        Subdirectories are not traversed. Errors from listing the directory
        (e.g. if it doesn't exist) are propagated.
        """
        return sorted(entry.name for entry in self.root.iterdir() if entry.is_file())

    def read_text(self, name: str) -> str:
        """Return the UTF-8 content of a file in the directory."""
        # only files directly under the root can be read, symlinks are followed
        if PurePath(name).name != name or name in ("", ".", ".."):
            raise FileNotFoundError(f"Not a content file: {name}")
        return (self.root / name).read_text(encoding="utf-8")
