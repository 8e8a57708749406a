"""An in-memory file system of directories and sized files."""

from __future__ import annotations

import time
from abc import ABC, abstractmethod


class Entry(ABC):
    """A named node of the file system, optionally inside a directory."""

    def __init__(self, name: str, parent: Directory | None) -> None:
        self.name = name
        self.parent = parent
        now = time.monotonic()
        self.created_at = now
        self.updated_at = now
        self.last_accessed = now

    def rename(self, new_name: str) -> None:
        """Give the entry a new name."""
        self.name = new_name
        self.updated_at = time.monotonic()

    def delete(self) -> bool:
        """Remove the entry from its parent; return whether it was removed."""
        if self.parent is None:
            return False
        return self.parent.delete_entry(self)

    def full_path(self) -> str:
        """Return the slash-separated path from the root to this entry."""
        if self.parent is None:
            return self.name
        return f"{self.parent.full_path()}/{self.name}"

    @abstractmethod
    def size(self) -> int:
        """Return the size in bytes."""


class Directory(Entry):
    """An entry that holds other entries."""

    def __init__(self, name: str, parent: Directory | None = None) -> None:
        super().__init__(name, parent)
        self._contents: list[Entry] = []

    def contents(self) -> list[Entry]:
        """Return the entries held directly in this directory."""
        return list(self._contents)

    def delete_entry(self, entry: Entry) -> bool:
        """Remove ``entry``; return whether it was present."""
        for index, held in enumerate(self._contents):
            if held is entry:
                del self._contents[index]
                return True
        return False

    def add_entry(self, entry: Entry) -> None:
        """Add ``entry`` to this directory."""
        self._contents.append(entry)

    def size(self) -> int:
        return sum(entry.size() for entry in self._contents)


class File(Entry):
    """An entry with a fixed size and textual content."""

    def __init__(self, name: str, parent: Directory | None, size: int) -> None:
        super().__init__(name, parent)
        self._size = size
        self.content = ""

    def size(self) -> int:
        return self._size