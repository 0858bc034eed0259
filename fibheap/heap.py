import logging
import math
from typing import Optional

from . import config
from .errors import InvalidKeyError
from .linked_list import CircularDoublyLinkedList
from .node import Node

log = logging.getLogger(__name__)

PHI = (1 + math.sqrt(5)) / 2


def max_degree(n: int) -> int:
    """
    Upper bound of the degree of any node in a heap of n nodes.

    A subtree rooted at a node of degree d holds at least Fib(d + 2)
    nodes, hence d <= log_phi(n).
    """
    if n < 2:
        return 0
    return math.floor(math.log(n, PHI))


class FibHeap():
    """
    Fibonacci Heap

    A mergeable min-heap made of a forest of heap-ordered trees. Insert,
    find-min, decrease-key and union run in O(1) amortized time, pop and
    delete in O(log n) amortized time.

    Attributes:
        n: number of nodes in the heap, roots and descendants alike
        min: the root with the minimum key, None if the heap is empty
        root_list: circular list of the roots of the forest

    Methods:
        insert(node, key): insert a node into the heap
        pop(): extract the node with the minimum key
        decrease_key(node, key): lower the key of a node in the heap
        increase_key(node, key): raise the key of a node in the heap
        change_key(node, key): move the key of a node either way
        delete(node): remove a node from the heap
        union(other): merge two heaps into a new one
        clear(): remove every node
    """

    def __init__(self):
        self.n = 0
        self.min: Optional[Node] = None
        self.root_list = CircularDoublyLinkedList()

    def __len__(self) -> int:
        return self.n

    def __bool__(self) -> bool:
        return self.n > 0

    def __repr__(self):
        return f'FibHeap(n={self.n}, min={self.min!r})'

    def empty(self) -> bool:
        return self.n == 0

    def insert(self, node: Node, key=None) -> Node:
        if key is not None:
            node.key = key
        node.degree, node.parent, node.mark = 0, None, False
        node.children = CircularDoublyLinkedList()
        self.root_list.insert(node)
        if self.min is None or node.key < self.min.key:
            self.min = node
        self.n += 1
        return node

    def pop(self) -> Optional[Node]:
        z = self.min
        if z is None:
            return None
        for x in z.children:
            x.parent, x.mark = None, False
        self.root_list.concat(z.children)
        z.degree = 0
        self.root_list.delete(z)
        if self.root_list.empty():
            self.min = None
        else:
            self.min = self.root_list.head
            self._consolidate()
        self.n -= 1
        return z

    def decrease_key(self, node: Node, key) -> Node:
        if key > node.key:
            raise InvalidKeyError(
                f'new key {key!r} is greater than current key {node.key!r}')
        node.key = key
        parent = node.parent
        if parent is not None and node.key < parent.key:
            self._cut(node, parent)
            self._cascading_cut(parent)
        if node.key < self.min.key:
            self.min = node
        return node

    def increase_key(self, node: Node, key) -> Node:
        if key < node.key:
            raise InvalidKeyError(
                f'new key {key!r} is smaller than current key {node.key!r}')
        self.delete(node)
        return self.insert(node, key)

    def change_key(self, node: Node, key) -> Node:
        if key < node.key:
            return self.decrease_key(node, key)
        elif key > node.key:
            return self.increase_key(node, key)
        return node

    def delete(self, node: Node) -> Node:
        parent = node.parent
        if parent is not None:
            self._cut(node, parent)
            self._cascading_cut(parent)
        # pop takes whatever min points at, the key is never compared
        self.min = node
        return self.pop()

    def union(self, other: 'FibHeap') -> 'FibHeap':
        """
        Unite two heaps into a new one.

        Both operands are emptied: their roots are spliced into the new
        heap's root list.
        """
        if other is self:
            raise ValueError('cannot unite a heap with itself')
        heap = self.__class__()
        heap.root_list.concat(self.root_list)
        heap.root_list.concat(other.root_list)
        if self.min is None or (other.min is not None
                                and other.min.key < self.min.key):
            heap.min = other.min
        else:
            heap.min = self.min
        heap.n = self.n + other.n
        log.debug('union: %d + %d nodes', self.n, other.n)
        for h in (self, other):
            h.min, h.n = None, 0
        return heap

    def clear(self) -> 'FibHeap':
        if config.DEBUG:
            from .view import walk

            for node in list(walk(self)):
                node.next, node.prev = node, node
        self.root_list = CircularDoublyLinkedList()
        self.min = None
        self.n = 0
        return self

    def _consolidate(self):
        degrees = [None] * (max_degree(self.n) + 1)

        roots = 0
        for x in self.root_list:
            roots += 1
            d = x.degree
            while degrees[d] is not None:
                y = degrees[d]
                if x.key > y.key:
                    x, y = y, x
                self._link(y, x)
                degrees[d] = None
                d += 1
            degrees[d] = x

        # the root list now holds exactly the roots left in `degrees`
        self.min = None
        trees = 0
        for x in degrees:
            if x is None:
                continue
            trees += 1
            if self.min is None or x.key < self.min.key:
                self.min = x
        log.debug('consolidate: %d roots -> %d trees', roots, trees)

    def _link(self, child: Node, parent: Node):
        self.root_list.delete(child)
        parent.children.insert(child)
        parent.degree += 1
        child.parent, child.mark = parent, False

    def _cut(self, child: Node, parent: Node):
        parent.children.delete(child)
        parent.degree -= 1
        self.root_list.insert(child)
        child.parent, child.mark = None, False

    def _cascading_cut(self, node: Node):
        parent = node.parent
        while parent is not None:
            if not node.mark:
                node.mark = True
                return
            log.debug('cascading cut: %r from %r', node, parent)
            self._cut(node, parent)
            node, parent = parent, parent.parent
