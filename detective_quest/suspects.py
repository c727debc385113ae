from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple

# 26 letters plus one overflow bucket for names without a letter initial.
BUCKET_COUNT = 27


@dataclass(eq=False)
class Suspect:
    name: str
    clues: List[str] = field(default_factory=list)
    next: Optional["Suspect"] = field(default=None, repr=False)

    @property
    def clue_count(self) -> int:
        return len(self.clues)


def bucket_index(name: str, bucket_count: int = BUCKET_COUNT) -> int:
    overflow = bucket_count - 1
    if not name:
        return overflow
    initial = name[0]
    if "A" <= initial <= "Z":
        initial = initial.lower()
    if "a" <= initial <= "z":
        return (ord(initial) - ord("a")) % overflow
    return overflow


class SuspectIndex:
    """Chained hash table from suspect name to the clues pointing at them.

    Each bucket is a singly linked chain with new suspects linked at the
    head. Enumeration and ``most_associated`` walk buckets in order and each
    chain head to tail, so among suspects with the same clue count the one
    met first in that walk wins.
    """

    def __init__(self, bucket_count: int = BUCKET_COUNT) -> None:
        if bucket_count < 2:
            raise ValueError("bucket_count must be at least 2")
        self.bucket_count = bucket_count
        self.buckets: List[Optional[Suspect]] = [None] * bucket_count

    def bucket_index(self, name: str) -> int:
        return bucket_index(name, self.bucket_count)

    def find(self, name: str) -> Optional[Suspect]:
        entry = self.buckets[self.bucket_index(name)]
        while entry is not None:
            if entry.name == name:
                return entry
            entry = entry.next
        return None

    def find_or_create(self, name: str) -> Suspect:
        found = self.find(name)
        if found is not None:
            return found
        idx = self.bucket_index(name)
        suspect = Suspect(name=name, next=self.buckets[idx])
        self.buckets[idx] = suspect
        return suspect

    def associate(self, name: str, clue_text: str) -> Suspect:
        suspect = self.find_or_create(name)
        suspect.clues.append(clue_text)
        return suspect

    def _entries(self) -> Iterator[Suspect]:
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next

    def most_associated(self) -> Optional[Suspect]:
        best: Optional[Suspect] = None
        for entry in self._entries():
            if best is None or entry.clue_count > best.clue_count:
                best = entry
        return best

    def for_each(
        self,
        visit: Optional[Callable[[str, List[str]], None]] = None,
    ) -> Iterator[Tuple[str, List[str]]]:
        for entry in self._entries():
            clues = list(entry.clues)
            if visit is not None:
                visit(entry.name, clues)
            yield entry.name, clues

    def teardown(self) -> int:
        released = 0
        for idx, head in enumerate(self.buckets):
            entry = head
            while entry is not None:
                following = entry.next
                entry.next = None
                entry.clues.clear()
                released += 1
                entry = following
            self.buckets[idx] = None
        return released

    def __len__(self) -> int:
        return sum(1 for _ in self._entries())
