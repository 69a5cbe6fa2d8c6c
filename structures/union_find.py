"""
union_find.py — Disjoint-Set Forest
====================================
Dict-backed union-find over node ids, used by Kruskal's MST.

  • find   – path compression: every node on the walk is re-pointed at the root
  • union  – union by rank: the shallower tree hangs under the deeper one;
             on a tie the first argument's root wins and gains a rank
"""

from typing import Dict, Hashable, Iterable


class UnionFind:
    def __init__(self, items: Iterable[Hashable] = ()):
        self.parent: Dict[Hashable, Hashable] = {}
        self.rank:   Dict[Hashable, int]      = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        if item not in self.parent:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        # compress
        while self.parent[item] != root:
            self.parent[item], item = root, self.parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding a and b.  False if they were already one set."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)

    def __contains__(self, item: Hashable) -> bool:
        return item in self.parent

    def __len__(self) -> int:
        return len(self.parent)
