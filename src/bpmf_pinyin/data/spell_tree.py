"""Character trie that recognizes the longest registered key at the front of a string."""

from __future__ import annotations

from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class SpellTree(Generic[T]):
    """Prefix tree mapping string keys to payloads.

    Each node is indexed by a single character and may carry a payload (the meaning of
    the path from the root) and further branches. Lookups commit greedily to the
    deepest node reachable on the input and fall back to the nearest payload-bearing
    ancestor on that path, so a shorter key never wins over a longer one.
    """

    __slots__ = ("meaning", "branches", "_frozen")

    def __init__(self) -> None:
        self.meaning: T | None = None
        self.branches: dict[str, SpellTree[T]] = {}
        self._frozen = False

    @classmethod
    def from_items(cls, items: Iterable[tuple[str, T]]) -> "SpellTree[T]":
        """Build a tree from ``(key, payload)`` pairs; later duplicates overwrite."""

        root: SpellTree[T] = cls()
        for key, meaning in items:
            root.insert(key, meaning)
        return root

    def insert(self, key: str, meaning: T) -> None:
        """Register ``key`` with ``meaning``, creating one node per character.

        Raises:
            RuntimeError: If the tree has been frozen.
            ValueError: If ``key`` is empty.
        """

        if self._frozen:
            raise RuntimeError("Cannot insert into a frozen SpellTree.")
        if not key:
            raise ValueError("SpellTree keys must be non-empty.")

        node = self
        for ch in key:
            child = node.branches.get(ch)
            if child is None:
                child = SpellTree()
                node.branches[ch] = child
            node = child
        node.meaning = meaning

    def freeze(self) -> None:
        """Reject any further inserts into this tree and all of its branches."""

        stack = [self]
        while stack:
            node = stack.pop()
            node._frozen = True
            stack.extend(node.branches.values())

    @property
    def frozen(self) -> bool:
        return self._frozen

    def find(self, text: str) -> tuple[T, str] | None:
        """Match the longest registered key at the start of ``text``.

        Returns:
            ``(payload, remainder)`` where ``remainder`` is ``text`` minus the matched
            key, or ``None`` when no prefix of ``text`` is a registered key.
        """

        node = self
        best: tuple[T, int] | None = None
        for idx, ch in enumerate(text):
            node = node.branches.get(ch)
            if node is None:
                break
            if node.meaning is not None:
                best = (node.meaning, idx + 1)
        if best is None:
            return None
        meaning, length = best
        return meaning, text[length:]

    def is_leaf(self) -> bool:
        return not self.branches

    def count_leaves(self) -> int:
        """Count the nodes below this one that have no branches."""

        total = 0
        for node in self.branches.values():
            total += 1 if node.is_leaf() else node.count_leaves()
        return total

    def keys(self) -> list[str]:
        """Return every registered key in insertion order of their branches."""

        found: list[str] = []

        def walk(node: SpellTree[T], prefix: str) -> None:
            if node.meaning is not None and prefix:
                found.append(prefix)
            for ch, child in node.branches.items():
                walk(child, prefix + ch)

        walk(self, "")
        return found

    def _show_nodes(self, lines: list[str], depth: int) -> None:
        for ch, node in self.branches.items():
            star = "*" if node.meaning is not None else ""
            lines.append(f"{'-':>{depth * 4 + 1}}  {ch}{star}")
            node._show_nodes(lines, depth + 1)

    def __str__(self) -> str:
        lines: list[str] = []
        self._show_nodes(lines, 0)
        return "\n".join(lines)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str) or not key:
            return False
        node: SpellTree[T] | None = self
        for ch in key:
            node = node.branches.get(ch)
            if node is None:
                return False
        return node.meaning is not None
