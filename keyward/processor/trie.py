"""Token trie: keyword storage for the extractor.

Edges are labelled by token keys, and a node is terminal when it carries a
``clean_word``. The key function is fixed when the trie is built:
identity for case-sensitive tries, ``str.casefold`` for case-insensitive
ones. Case folding only affects which tokens are considered equal — the
stored ``clean_word`` is returned untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Iterator


def exact_key(token: str) -> str:
    return token


def folded_key(token: str) -> str:
    return token.casefold()


@dataclass
class Node:
    """One trie position.

    Attributes:
        clean_word: Replacement text of the keyword ending here, or ``None``
            if no keyword ends at this node. An empty string is a valid
            replacement (it deletes the keyword on replace).
        children: Token key -> child node.
    """

    clean_word: str | None = None
    children: dict[str, Node] = field(default_factory=dict)

    @property
    def is_terminal(self) -> bool:
        """True if a registered keyword ends at this node."""
        return self.clean_word is not None


class Trie:
    """Prefix tree keyed by tokens.

    Tracks the number of keywords (terminal nodes), not the number of
    nodes. Not safe to mutate while an extraction is reading it.
    """

    def __init__(self, case_sensitive: bool = True) -> None:
        self._case_sensitive = case_sensitive
        self._key: Callable[[str], str] = exact_key if case_sensitive else folded_key
        self._root = Node()
        self._len = 0

    @property
    def case_sensitive(self) -> bool:
        """Whether token keys are compared exactly."""
        return self._case_sensitive

    @property
    def root(self) -> Node:
        return self._root

    def __len__(self) -> int:
        return self._len

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return (
            self._case_sensitive == other._case_sensitive
            and self._len == other._len
            and self._root == other._root
        )

    def child(self, node: Node, token: str) -> Node | None:
        """Return the child of ``node`` reached by ``token``, if any."""
        return node.children.get(self._key(token))

    def insert(self, tokens: Iterable[str], clean_word: str) -> bool:
        """Insert a keyword's token path.

        Re-inserting an existing path overwrites its ``clean_word`` without
        changing the keyword count. An empty token path is ignored.

        Args:
            tokens: The keyword's tokens, in order.
            clean_word: Replacement text for the keyword.

        Returns:
            True if a new keyword was added, False if an existing one was
            overwritten or the path was empty.
        """
        node = self._root
        depth = 0
        for token in tokens:
            key = self._key(token)
            child = node.children.get(key)
            if child is None:
                child = node.children[key] = Node()
            node = child
            depth += 1

        if depth == 0:
            return False

        added = not node.is_terminal
        if added:
            self._len += 1
        node.clean_word = clean_word
        return added

    def lookup(self, tokens: Iterable[str]) -> str | None:
        """Return the clean word registered for an exact token path."""
        node: Node | None = self._root
        depth = 0
        for token in tokens:
            node = self.child(node, token)
            if node is None:
                return None
            depth += 1
        if depth == 0:
            return None
        return node.clean_word

    def iter_keywords(self) -> Iterator[tuple[tuple[str, ...], str]]:
        """Yield ``(token_keys, clean_word)`` for every terminal node.

        Walks iteratively, depth first. Keys are the folded keys for a
        case-insensitive trie.
        """
        stack: list[tuple[tuple[str, ...], Node]] = [((), self._root)]
        while stack:
            path, node = stack.pop()
            if node.is_terminal and path:
                yield path, node.clean_word
            for key, child in node.children.items():
                stack.append((path + (key,), child))
