from convex_hull_2d.exceptions import HullInvariantError


class _Node:
    __slots__ = ('index', 'prev', 'next')

    def __init__(self, index):
        self.index = index
        self.prev = self
        self.next = self


class HullChain:
    """
    Cyclic doubly-linked list of point indices in hull order.

    Holds the hull boundary while quickhull runs. Two neighbouring entries
    bound a sub-problem whose hull points must end up between them. Nodes are
    looked up by point index, so inserting before a given point is O(1).
    """

    def __init__(self, first: int, second: int):
        if first == second:
            raise HullInvariantError(f"Chain needs two distinct points, got {first} twice")
        self._head = _Node(first)
        self._nodes = {first: self._head}
        self._link_before(_Node(second), self._head)

    def _link_before(self, node, before):
        node.prev = before.prev
        node.next = before
        before.prev.next = node
        before.prev = node
        self._nodes[node.index] = node

    def insert_before(self, index: int, before: int) -> None:
        """Insert point `index` right in front of point `before`"""
        if before not in self._nodes:
            raise HullInvariantError(f"Point {before} is not on the hull chain")
        if index in self._nodes:
            raise HullInvariantError(f"Point {index} is already on the hull chain")
        self._link_before(_Node(index), self._nodes[before])

    def next_of(self, index: int) -> int:
        return self._nodes[index].next.index

    def prev_of(self, index: int) -> int:
        return self._nodes[index].prev.index

    def __contains__(self, index):
        return index in self._nodes

    def __len__(self):
        return len(self._nodes)

    def __iter__(self):
        node = self._head
        for _ in range(len(self._nodes)):
            yield node.index
            node = node.next

    def edges(self):
        """Yield (a, b) for every entry and its successor, wrapping around"""
        for index in self:
            yield index, self._nodes[index].next.index
