from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, List, Optional, Tuple


class NoSuchPath(ValueError):
    """Raised when the requested neighbour does not exist."""


class InvalidMove(ValueError):
    """Raised for navigation input that is not a known direction."""


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    STOP = "stop"

    @staticmethod
    def parse(raw: str) -> "Direction":
        """Accept a keystroke (``e``/``d``/``s``) or a direction name."""
        value = (raw or "").strip().lower()
        if value in KEYS:
            return KEYS[value]
        try:
            return Direction(value)
        except ValueError:
            raise InvalidMove(f"Unknown direction: {raw!r}") from None


KEYS = {
    "e": Direction.LEFT,
    "d": Direction.RIGHT,
    "s": Direction.STOP,
}


@dataclass(eq=False)
class LocationNode:
    name: str
    left: Optional["LocationNode"] = None
    right: Optional["LocationNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def create(name: str) -> LocationNode:
    return LocationNode(name=name)


def connect(
    parent: Optional[LocationNode],
    left: Optional[LocationNode],
    right: Optional[LocationNode],
) -> None:
    if parent is None:
        return
    parent.left = left
    parent.right = right


def traverse(node: LocationNode, choice: Direction | str) -> Optional[LocationNode]:
    """Step one edge from ``node``.

    Returns ``None`` for ``stop``. Raises ``NoSuchPath`` when the requested
    child is absent; nothing is modified in that case.
    """
    direction = choice if isinstance(choice, Direction) else Direction.parse(choice)
    if direction is Direction.STOP:
        return None
    child = node.left if direction is Direction.LEFT else node.right
    if child is None:
        raise NoSuchPath(f"No path {direction.value} from {node.name!r}")
    return child


def walk_preorder(
    node: Optional[LocationNode],
    visit: Optional[Callable[[LocationNode, int], None]] = None,
) -> Iterator[Tuple[LocationNode, int]]:
    stack: List[Tuple[LocationNode, int]] = []
    if node is not None:
        stack.append((node, 0))
    while stack:
        current, depth = stack.pop()
        if visit is not None:
            visit(current, depth)
        yield current, depth
        # Right first so the left subtree comes out first.
        if current.right is not None:
            stack.append((current.right, depth + 1))
        if current.left is not None:
            stack.append((current.left, depth + 1))


def render(node: Optional[LocationNode]) -> List[str]:
    return [f"{'  ' * depth}- {current.name}" for current, depth in walk_preorder(node)]


def build(layout: Optional[dict]) -> Optional[LocationNode]:
    """Build a map from the nested ``{"name", "left", "right"}`` layout."""
    if not layout:
        return None
    root = create(str(layout["name"]))
    pending = [(root, layout)]
    while pending:
        parent, raw = pending.pop()
        left = create(str(raw["left"]["name"])) if raw.get("left") else None
        right = create(str(raw["right"]["name"])) if raw.get("right") else None
        connect(parent, left, right)
        if left is not None:
            pending.append((left, raw["left"]))
        if right is not None:
            pending.append((right, raw["right"]))
    return root


def teardown(node: Optional[LocationNode]) -> int:
    released = 0
    for current, _ in list(walk_preorder(node)):
        current.left = None
        current.right = None
        released += 1
    return released
