"""
Binary search tree of unique clue texts, kept in lexicographic order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional


@dataclass(eq=False)
class ClueNode:
    text: str
    lesser: Optional["ClueNode"] = None
    greater: Optional["ClueNode"] = None


def insert(root: Optional[ClueNode], text: str) -> ClueNode:
    """Insert ``text`` and return the root of the resulting tree.

    Equal text is ignored, so inserting the same clue twice leaves the
    tree unchanged. Callers must rebind to the returned root.
    """
    if root is None:
        return ClueNode(text=text)
    node = root
    while True:
        if text < node.text:
            if node.lesser is None:
                node.lesser = ClueNode(text=text)
                break
            node = node.lesser
        elif text > node.text:
            if node.greater is None:
                node.greater = ClueNode(text=text)
                break
            node = node.greater
        else:
            break
    return root


def in_order(
    root: Optional[ClueNode],
    visit: Optional[Callable[[str], None]] = None,
) -> Iterator[str]:
    stack: List[ClueNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.lesser
        node = stack.pop()
        if visit is not None:
            visit(node.text)
        yield node.text
        node = node.greater


def count(root: Optional[ClueNode]) -> int:
    return sum(1 for _ in in_order(root))


def teardown(root: Optional[ClueNode]) -> int:
    """Unlink every node in post-order and return how many were released."""
    released = 0
    stack: List[ClueNode] = []
    last: Optional[ClueNode] = None
    node = root
    while stack or node is not None:
        if node is not None:
            stack.append(node)
            node = node.lesser
            continue
        peek = stack[-1]
        if peek.greater is not None and last is not peek.greater:
            node = peek.greater
            continue
        stack.pop()
        peek.lesser = None
        peek.greater = None
        released += 1
        last = peek
    return released
