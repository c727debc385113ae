from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from detective_quest import clues as clue_tree
from detective_quest import locations
from detective_quest.casefile import CaseFile
from detective_quest.locations import Direction, LocationNode
from detective_quest.suspects import Suspect, SuspectIndex


class EmptyClueError(ValueError):
    """Raised when a manually entered clue has no text."""


@dataclass
class Investigation:
    case: CaseFile = field(default_factory=CaseFile.default)

    def __post_init__(self) -> None:
        self.map_root: Optional[LocationNode] = locations.build(self.case.rooms)
        self.clue_root: Optional[clue_tree.ClueNode] = None
        self.suspects = SuspectIndex(self.case.bucket_count)
        self.position: Optional[LocationNode] = None
        # Clues recorded on the most recent room entry.
        self.found: List[Tuple[str, str]] = []

    def record(self, clue: str, suspect: str) -> Suspect:
        self.clue_root = clue_tree.insert(self.clue_root, clue)
        return self.suspects.associate(suspect, clue)

    def enter(self, room: LocationNode) -> List[Tuple[str, str]]:
        self.position = room
        self.found = self.case.clues_for(room.name)
        for clue, suspect in self.found:
            self.record(clue, suspect)
        return self.found

    def start_exploration(self) -> LocationNode:
        if self.map_root is None:
            raise ValueError("Case has no rooms to explore")
        self.enter(self.map_root)
        return self.map_root

    def move(self, choice: Direction | str) -> Optional[LocationNode]:
        """Move one step from the current room.

        Returns the room entered, or ``None`` when the player stops. Raises
        ``InvalidMove`` or ``NoSuchPath`` without touching any state.
        """
        if self.position is None:
            raise ValueError("Exploration has not started")
        nxt = locations.traverse(self.position, choice)
        if nxt is None:
            self.position = None
            return None
        self.enter(nxt)
        return nxt

    def add_clue(self, text: str, suspect: str = "") -> Suspect:
        text = (text or "").strip()
        if not text:
            raise EmptyClueError("Clue text must not be empty")
        name = (suspect or "").strip() or self.case.unknown_suspect
        return self.record(text, name)

    def clues(self) -> List[str]:
        return list(clue_tree.in_order(self.clue_root))

    def clue_count(self) -> int:
        return clue_tree.count(self.clue_root)

    def associations(self) -> List[Tuple[str, List[str]]]:
        return list(self.suspects.for_each())

    def prime_suspect(self) -> Optional[Suspect]:
        return self.suspects.most_associated()

    def map_lines(self) -> List[str]:
        return locations.render(self.map_root)

    def close(self) -> Dict[str, int]:
        released = {
            "clues": clue_tree.teardown(self.clue_root),
            "suspects": self.suspects.teardown(),
            "rooms": locations.teardown(self.map_root),
        }
        self.clue_root = None
        self.map_root = None
        self.position = None
        self.found = []
        return released
