"""In-memory navigation history, modelled on the browser history stack."""

from dataclasses import dataclass, field

ROOT_PATH = "/"


@dataclass(frozen=True)
class HistoryEntry:
    """A visited path and the informational state attached to it."""

    path: str
    state: dict[str, str] = field(default_factory=dict)


class History:
    """Linear history with a cursor; pushing discards forward entries."""

    def __init__(self, initial_path: str = ROOT_PATH) -> None:
        self._entries: list[HistoryEntry] = [HistoryEntry(initial_path)]
        self._index = 0

    @property
    def current(self) -> HistoryEntry:
        return self._entries[self._index]

    @property
    def entries(self) -> list[HistoryEntry]:
        """Copy of all entries, oldest first."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, path: str, state: dict[str, str] | None = None) -> None:
        """Add an entry after the current one."""
        del self._entries[self._index + 1 :]
        self._entries.append(HistoryEntry(path, dict(state or {})))
        self._index += 1

    def replace(self, path: str, state: dict[str, str] | None = None) -> None:
        """Overwrite the current entry."""
        self._entries[self._index] = HistoryEntry(path, dict(state or {}))

    def back(self) -> HistoryEntry | None:
        """Move to the previous entry, or return None at the start."""
        if self._index == 0:
            return None
        self._index -= 1
        return self.current

    def forward(self) -> HistoryEntry | None:
        """Move to the next entry, or return None at the end."""
        if self._index >= len(self._entries) - 1:
            return None
        self._index += 1
        return self.current
