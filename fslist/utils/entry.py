from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

HIDDEN_MARKER = '.'


class EntryKind(Enum):
    FILE = 'file'
    DIR = 'dir'

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS = {
    EntryKind.FILE: 'File',
    EntryKind.DIR: 'Dir',
}


@dataclass
class Entry:
    name: str
    size: int
    modified_age: int
    accessed_age: int
    created_age: Optional[int]
    kind: EntryKind
    readonly: bool

    @property
    def hidden(self) -> bool:
        return self.name.startswith(HIDDEN_MARKER)


@dataclass
class EntrySet:
    """Ordered entries of one directory listing.

    Attributes
    ----------
    entries : List[Entry]
        Entries in enumeration (or transformed) order.
    """

    entries: List[Entry] = field(default_factory=list)

    @property
    def max_name_length(self) -> int:
        """Longest entry name, 0 for an empty set."""
        return max((len(entry.name) for entry in self.entries), default=0)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)
