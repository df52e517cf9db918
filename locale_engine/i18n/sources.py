"""Backing storage for resource files.

The loader depends only on listing entries and reading an entry's text;
any storage satisfying ResourceSource can stand in for the file system.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from locale_engine.i18n.errors import LoadFailure
from locale_engine.i18n.parsers import split_entry


class ResourceSource(ABC):
    """Abstract base for resource storage.

    Implementations must define how to enumerate resource entries and
    read their contents.
    """

    @abstractmethod
    def list_entries(self) -> List[str]:
        """List resource entry names (e.g. "en.json").

        Raises:
            LoadFailure: If the entries cannot be listed.
        """

    @abstractmethod
    def read_text(self, entry: str) -> str:
        """Read an entry's contents as text.

        Raises:
            LoadFailure: If the entry cannot be read.
        """


class DirectorySource(ResourceSource):
    """Resource source backed by a local directory.

    Attributes:
        directory: Path to the directory containing <language>.<ext> files.
    """

    def __init__(self, directory: Union[str, Path]):
        """Initialize directory source.

        Args:
            directory: Directory path. It is not required to exist yet.
        """
        self.directory = Path(directory)

    def list_entries(self) -> List[str]:
        """List files in the directory in sorted order, skipping subdirectories."""
        try:
            return sorted(p.name for p in self.directory.iterdir() if p.is_file())
        except OSError as e:
            raise LoadFailure(
                None, f"Cannot list directory {self.directory}: {e}"
            ) from e

    def read_text(self, entry: str) -> str:
        """Read a file from the directory as UTF-8 text."""
        try:
            return (self.directory / entry).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            language, _ = split_entry(entry)
            raise LoadFailure(language, f"Cannot read {entry}: {e}") from e

    def __repr__(self) -> str:
        return f"DirectorySource({str(self.directory)!r})"
