"""A double-ended queue stored as a map of fixed-size blocks."""

from __future__ import annotations

import operator
import sys
from itertools import islice
from typing import Any, Iterator, List, Optional

_MIN_MAP_SIZE = 8


class Deque:
    """Sequence with amortised O(1) insertion and removal at both ends.

    Elements live in fixed-size blocks; a map of block slots grows in
    either direction, so existing blocks are never copied on growth.
    """

    BLOCK_SIZE = 64

    def __init__(self, count: int = 0, value: Any = None) -> None:
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must be non-negative")
        self._create_map(count)
        for node in range(self._start_node, self._finish_node):
            self._map[node][:] = [value] * self.BLOCK_SIZE
        self._map[self._finish_node][: self._finish_off] = [value] * self._finish_off

    # -- internal layout ------------------------------------------------

    def _new_block(self) -> List[Any]:
        return [None] * self.BLOCK_SIZE

    def _create_map(self, num_elements: int) -> None:
        num_nodes = num_elements // self.BLOCK_SIZE + 1
        map_size = max(_MIN_MAP_SIZE, num_nodes + 2)
        self._map: List[Optional[List[Any]]] = [None] * map_size
        first = (map_size - num_nodes) // 2
        for node in range(first, first + num_nodes):
            self._map[node] = self._new_block()
        self._start_node = first
        self._start_off = 0
        self._finish_node = first + num_nodes - 1
        self._finish_off = num_elements % self.BLOCK_SIZE

    def _reallocate_map(self, nodes_to_add: int, add_at_front: bool) -> None:
        old_num_nodes = self._finish_node - self._start_node + 1
        new_num_nodes = old_num_nodes + nodes_to_add
        blocks = self._map[self._start_node : self._finish_node + 1]
        map_size = len(self._map)
        if map_size <= 2 * new_num_nodes:
            map_size += max(map_size, nodes_to_add) + 2
        new_start = (map_size - new_num_nodes) // 2 + (nodes_to_add if add_at_front else 0)
        new_map: List[Optional[List[Any]]] = [None] * map_size
        new_map[new_start : new_start + old_num_nodes] = blocks
        self._map = new_map
        self._start_node = new_start
        self._finish_node = new_start + old_num_nodes - 1

    def _slot(self, index: int) -> tuple:
        offset = self._start_off + index
        return self._start_node + offset // self.BLOCK_SIZE, offset % self.BLOCK_SIZE

    def _get(self, index: int) -> Any:
        node, off = self._slot(index)
        return self._map[node][off]

    def _set(self, index: int, value: Any) -> None:
        node, off = self._slot(index)
        self._map[node][off] = value

    def _normalise(self, pos: Any) -> int:
        index = operator.index(pos)
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("deque index out of range")
        return index

    def _require_nonempty(self, what: str) -> None:
        if self.empty():
            raise IndexError(f"{what} on empty deque")

    # -- construction and assignment -----------------------------------

    def copy(self) -> "Deque":
        """Return a new deque holding the same elements."""
        result = type(self)()
        for item in self:
            result.push_back(item)
        return result

    def swap(self, other: "Deque") -> None:
        """Exchange the contents of this deque and ``other``."""
        if not isinstance(other, Deque):
            raise TypeError("can only swap with another Deque")
        self.__dict__, other.__dict__ = other.__dict__, self.__dict__

    # -- element access -------------------------------------------------

    def at(self, pos: int) -> Any:
        """Return the element at ``pos``; negative positions are rejected."""
        index = operator.index(pos)
        if not 0 <= index < len(self):
            raise IndexError("deque::at")
        return self._get(index)

    def __getitem__(self, pos: int) -> Any:
        return self._get(self._normalise(pos))

    def __setitem__(self, pos: int, value: Any) -> None:
        self._set(self._normalise(pos), value)

    def front(self) -> Any:
        self._require_nonempty("front")
        return self._map[self._start_node][self._start_off]

    def back(self) -> Any:
        self._require_nonempty("back")
        return self._get(len(self) - 1)

    # -- iteration ------------------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        if self._start_node == self._finish_node:
            yield from islice(self._map[self._start_node], self._start_off, self._finish_off)
            return
        yield from islice(self._map[self._start_node], self._start_off, None)
        for block in self._map[self._start_node + 1 : self._finish_node]:
            yield from block
        yield from islice(self._map[self._finish_node], 0, self._finish_off)

    def __reversed__(self) -> Iterator[Any]:
        for index in range(len(self) - 1, -1, -1):
            yield self._get(index)

    # -- capacity -------------------------------------------------------

    def __len__(self) -> int:
        return (
            self.BLOCK_SIZE * (self._finish_node - self._start_node)
            + self._finish_off
            - self._start_off
        )

    def empty(self) -> bool:
        return self._start_node == self._finish_node and self._start_off == self._finish_off

    def max_size(self) -> int:
        return sys.maxsize

    def shrink_to_fit(self) -> None:
        """Drop unused map slots around the occupied blocks."""
        blocks = self._map[self._start_node : self._finish_node + 1]
        self._map = [None, *blocks, None]
        self._start_node = 1
        self._finish_node = len(blocks)

    # -- modifiers ------------------------------------------------------

    def clear(self) -> None:
        for node in range(self._start_node + 1, self._finish_node + 1):
            self._map[node] = None
        self._map[self._start_node] = self._new_block()
        self._finish_node = self._start_node
        self._finish_off = self._start_off

    def insert(self, pos: int, value: Any) -> int:
        """Insert ``value`` before ``pos`` and return the index it now has."""
        size = len(self)
        index = operator.index(pos)
        if not 0 <= index <= size:
            raise IndexError("insert position out of range")
        if index < size // 2:
            self.push_front(value)
            for i in range(index):
                self._set(i, self._get(i + 1))
        else:
            self.push_back(value)
            for i in range(size, index, -1):
                self._set(i, self._get(i - 1))
        self._set(index, value)
        return index

    def erase(self, pos: int) -> int:
        """Remove the element at ``pos``; return the index of the one after it."""
        size = len(self)
        index = operator.index(pos)
        if not 0 <= index < size:
            raise IndexError("erase position out of range")
        if index < size // 2:
            for i in range(index, 0, -1):
                self._set(i, self._get(i - 1))
            self.pop_front()
        else:
            for i in range(index, size - 1):
                self._set(i, self._get(i + 1))
            self.pop_back()
        return index

    def push_back(self, value: Any) -> None:
        self._map[self._finish_node][self._finish_off] = value
        if self._finish_off < self.BLOCK_SIZE - 1:
            self._finish_off += 1
            return
        if self._finish_node + 1 >= len(self._map):
            self._reallocate_map(1, False)
        self._map[self._finish_node + 1] = self._new_block()
        self._finish_node += 1
        self._finish_off = 0

    def push_front(self, value: Any) -> None:
        if self._start_off > 0:
            self._start_off -= 1
        else:
            if self._start_node == 0:
                self._reallocate_map(1, True)
            self._map[self._start_node - 1] = self._new_block()
            self._start_node -= 1
            self._start_off = self.BLOCK_SIZE - 1
        self._map[self._start_node][self._start_off] = value

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        self._require_nonempty("pop_back")
        if self._finish_off > 0:
            self._finish_off -= 1
        else:
            self._map[self._finish_node] = None
            self._finish_node -= 1
            self._finish_off = self.BLOCK_SIZE - 1
        block = self._map[self._finish_node]
        value = block[self._finish_off]
        block[self._finish_off] = None
        return value

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        self._require_nonempty("pop_front")
        block = self._map[self._start_node]
        value = block[self._start_off]
        block[self._start_off] = None
        if self._start_off < self.BLOCK_SIZE - 1:
            self._start_off += 1
        else:
            self._map[self._start_node] = None
            self._start_node += 1
            self._start_off = 0
        return value

    def resize(self, count: int, value: Any = None) -> None:
        """Grow with copies of ``value`` or shrink from the back to ``count``."""
        count = operator.index(count)
        if count < 0:
            raise ValueError("count must be non-negative")
        while len(self) > count:
            self.pop_back()
        while len(self) < count:
            self.push_back(value)

    # -- comparison -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def _less(self, other: "Deque") -> bool:
        for a, b in zip(self, other):
            if a < b:
                return True
            if b < a:
                return False
        return len(self) < len(other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return self._less(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return not other._less(self)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return other._less(self)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Deque):
            return NotImplemented
        return not self._less(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def swap(lhs: Deque, rhs: Deque) -> None:
    """Exchange the contents of two deques."""
    lhs.swap(rhs)