# disjoint_set.py
from typing import Dict, List, Set

from errors import InvalidSizeError, OutOfRangeError


class DisjointSet:
    """
    Union-find over the cell indices 0..n-1.

    Uses path compression and union by rank. Neither changes which cells
    end up connected, only how quickly find() gets there.
    """

    def __init__(self, n: int):
        if n <= 0:
            raise InvalidSizeError(f"DisjointSet size must be positive, got {n}.")
        self.parent: List[int] = list(range(n))
        self._rank: List[int] = [0] * n

    def _check_index(self, index: int):
        if not (0 <= index < len(self.parent)):
            raise OutOfRangeError(
                f"Index {index} outside DisjointSet range [0, {len(self.parent)})."
            )

    def find(self, index: int) -> int:
        """Returns the representative of the set containing index."""
        self._check_index(index)

        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression: point everything on the walk straight at the root
        current = index
        while self.parent[current] != root:
            next_index = self.parent[current]
            self.parent[current] = root
            current = next_index

        return root

    def union(self, a: int, b: int):
        """Merges the sets containing a and b. No-op if already merged."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return

        if self._rank[root_a] < self._rank[root_b]:
            self.parent[root_a] = root_b
        elif self._rank[root_a] > self._rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self._rank[root_a] += 1

    def same_set(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def size(self) -> int:
        """Returns the number of elements tracked."""
        return len(self.parent)

    def set_count(self) -> int:
        """Returns the number of disjoint classes."""
        return sum(1 for i in range(len(self.parent)) if self.find(i) == i)

    def get_all_sets(self) -> Dict[int, Set[int]]:
        """Maps each representative to the members of its set."""
        sets: Dict[int, Set[int]] = {}
        for i in range(len(self.parent)):
            sets.setdefault(self.find(i), set()).add(i)
        return sets

    def __repr__(self) -> str:
        return f"DisjointSet(size={self.size()}, sets={self.set_count()})"
