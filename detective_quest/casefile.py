from __future__ import annotations

import copy
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from detective_quest import game_data
from detective_quest.suspects import BUCKET_COUNT


@dataclass(frozen=True)
class CaseFile:
    name: str
    rooms: Dict[str, Any]
    room_clues: Dict[str, List[Tuple[str, str]]]
    unknown_suspect: str = game_data.UNKNOWN_SUSPECT
    bucket_count: int = BUCKET_COUNT

    @staticmethod
    def default() -> "CaseFile":
        return CaseFile(
            name=game_data.CASE_NAME,
            rooms=copy.deepcopy(game_data.MANSION),
            room_clues={room: list(pairs) for room, pairs in game_data.ROOM_CLUES.items()},
        )

    @staticmethod
    def load(path: Path) -> "CaseFile":
        with path.open("r", encoding="utf-8") as fh:
            raw = json.load(fh)
        if not isinstance(raw, dict):
            raise ValueError(f"Case file must hold a JSON object: {path}")
        return CaseFile.from_dict(raw, default_name=path.stem)

    @staticmethod
    def from_dict(raw: Dict[str, Any], default_name: str = game_data.CASE_NAME) -> "CaseFile":
        fallback = CaseFile.default()
        rooms = raw.get("rooms", fallback.rooms)
        _check_rooms(rooms)

        raw_clues = raw.get("room_clues", fallback.room_clues)
        if not isinstance(raw_clues, dict):
            raise ValueError("room_clues must be an object mapping room names to clue lists")

        room_clues: Dict[str, List[Tuple[str, str]]] = {}
        for room, pairs in raw_clues.items():
            if not isinstance(pairs, list):
                raise ValueError(f"room_clues[{room!r}] must be a list of [clue, suspect] pairs")
            parsed = []
            for pair in pairs:
                if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                    raise ValueError(f"room_clues[{room!r}] entries must be [clue, suspect] pairs")
                parsed.append((str(pair[0]), str(pair[1])))
            room_clues[str(room)] = parsed

        try:
            bucket_count = int(raw.get("bucket_count", BUCKET_COUNT))
        except (TypeError, ValueError):
            raise ValueError("bucket_count must be an integer") from None
        if bucket_count < 2:
            raise ValueError("bucket_count must be at least 2")

        return CaseFile(
            name=str(raw.get("name", default_name)),
            rooms=rooms,
            room_clues=room_clues,
            unknown_suspect=str(raw.get("unknown_suspect", game_data.UNKNOWN_SUSPECT)),
            bucket_count=bucket_count,
        )

    def clues_for(self, room: str) -> List[Tuple[str, str]]:
        return list(self.room_clues.get(room, []))


def _check_rooms(rooms: Optional[Dict[str, Any]]) -> None:
    pending = [rooms]
    while pending:
        raw = pending.pop()
        if not isinstance(raw, dict) or not raw.get("name"):
            raise ValueError("Every room must be an object with a non-empty 'name'")
        for side in ("left", "right"):
            child = raw.get(side)
            if child is not None:
                pending.append(child)
