from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Iterable


class TrieNode:
    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_word: bool = False


class Trie:
    def __init__(self):
        self.root = TrieNode()

    def insert(self, word: str):
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        node.is_word = True

    def walk(self, prefix: str) -> TrieNode | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def has_prefix(self, prefix: str) -> bool:
        node = self.walk(prefix)
        return node is not None and (node.is_word or bool(node.children))


class ReadWriteLock:
    """Shared reads, exclusive writes. Waiting writers block new readers."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writing or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writing or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class Dictionary:
    """Valid words plus a found flag per word, safe to share between search threads.

    The prefix index is built once and never changes; only the found flags are
    written during a search. Use :meth:`fresh` to search again from scratch.
    """

    def __init__(self, words: Iterable[str] = ()):
        self._trie = Trie()
        self._found: dict[str, bool] = {}
        self._lock = ReadWriteLock()
        for word in words:
            if word and word not in self._found:
                self._found[word] = False
                self._trie.insert(word)

    def __len__(self) -> int:
        return len(self._found)

    def __contains__(self, word: str) -> bool:
        return word in self._found

    @property
    def words(self) -> list[str]:
        return list(self._found)

    @property
    def root(self) -> TrieNode:
        return self._trie.root

    # The trie is never written after __init__, prefix queries need no lock.

    def has_prefix(self, prefix: str) -> bool:
        return self._trie.has_prefix(prefix)

    def descend(self, node: TrieNode, letters: str) -> TrieNode | None:
        """Follow ``letters`` down from ``node``; None when no word continues that way.

        Same test as :meth:`has_prefix` on the whole prefix, one step at a time.
        """
        for ch in letters:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def exact_match(self, word: str) -> tuple[bool, bool]:
        """Return (found, exists) for ``word``."""
        with self._lock.read():
            found = self._found.get(word)
        if found is None:
            return False, False
        return found, True

    def mark_found(self, word: str) -> bool:
        """Flag ``word`` as found. True only the first time; non-words are ignored."""
        with self._lock.write():
            if self._found.get(word) is not False:
                return False
            self._found[word] = True
            return True

    def found_words(self) -> list[str]:
        with self._lock.read():
            return [w for w, found in self._found.items() if found]

    def fresh(self) -> Dictionary:
        clone = Dictionary.__new__(Dictionary)
        clone._trie = self._trie
        clone._found = dict.fromkeys(self._found, False)
        clone._lock = ReadWriteLock()
        return clone
