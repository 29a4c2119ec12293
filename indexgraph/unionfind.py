"""
Union-Find (disjoint set) data structure.

Independent of the graph types so that any hashable elements (typically
vertex indices) can be grouped. Used by cycle detection and by the spanning
forest checks.
"""

from typing import Dict, Hashable, Iterable


class UnionFind:
    """
    Union-Find with path compression and union by size.

    Example:
        >>> uf = UnionFind(range(4))
        >>> uf.union(0, 1)
        True
        >>> uf.union(1, 0)
        False
        >>> uf.connected(0, 1), uf.component_count
        (True, 3)
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        """
        Initialize with every element in its own set.

        Args:
            elements: Initial elements.
        """
        self.parent: Dict[Hashable, Hashable] = {}
        self.size: Dict[Hashable, int] = {}
        self._components = 0

        for element in elements:
            self.add(element)

    def add(self, x: Hashable) -> None:
        """Add ``x`` as a singleton set; no-op if already present."""
        if x not in self.parent:
            self.parent[x] = x
            self.size[x] = 1
            self._components += 1

    def find(self, x: Hashable) -> Hashable:
        """
        Return the representative of the set containing ``x``.

        Raises:
            KeyError: If ``x`` was never added.
        """
        root = x
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]

        return root

    def union(self, x: Hashable, y: Hashable) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two sets were merged, False if ``x`` and ``y`` were
            already in the same set (the link would close a cycle).
        """
        root_x = self.find(x)
        root_y = self.find(y)

        if root_x == root_y:
            return False

        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        self._components -= 1
        return True

    def connected(self, x: Hashable, y: Hashable) -> bool:
        return self.find(x) == self.find(y)

    @property
    def component_count(self) -> int:
        return self._components

    def __len__(self) -> int:
        return len(self.parent)

    def __contains__(self, x: object) -> bool:
        return x in self.parent


__all__ = ["UnionFind"]
