from typing import Iterator

from . import config


class Sentinel():
    """Anchor of a circular list, never carries data."""

    __slots__ = ('next', 'prev')

    def __init__(self):
        self.next, self.prev = self, self

    def __repr__(self):
        return 'Sentinel()'


class CircularDoublyLinkedList():
    """
    Circular doubly linked list with a sentinel

    Elements are linked intrusively through their own `next` and `prev`
    attributes, so an element can be a member of at most one list at a
    time. The list never looks at any other attribute of its elements.

    Methods:
        insert(node): splice node in at the head
        delete(node): unlink node from this list
        concat(other): move every element of other into this list
    """

    __slots__ = ('sentinel', )

    def __init__(self):
        self.sentinel = Sentinel()

    @property
    def head(self):
        if self.empty():
            return None
        return self.sentinel.next

    @property
    def tail(self):
        if self.empty():
            return None
        return self.sentinel.prev

    def empty(self) -> bool:
        return self.sentinel.next is self.sentinel

    def insert(self, node):
        if config.DEBUG:
            assert node.next is node and node.prev is node, (
                f'{node!r} is still linked into another list')
        sentinel = self.sentinel
        node.next, node.prev = sentinel.next, sentinel
        sentinel.next.prev = node
        sentinel.next = node
        return node

    def delete(self, node):
        node.prev.next, node.next.prev = node.next, node.prev
        node.next, node.prev = node, node
        return node

    def concat(self, other: 'CircularDoublyLinkedList'):
        if other is self or other.empty():
            return self
        sentinel = self.sentinel
        first, last = other.sentinel.next, other.sentinel.prev
        last.next, sentinel.next.prev = sentinel.next, last
        sentinel.next, first.prev = first, sentinel
        other.sentinel = Sentinel()
        return self

    def __iter__(self) -> Iterator:
        sentinel = self.sentinel
        x = sentinel.next
        while x is not sentinel:
            # the consumer may move `current` to another list
            current, x = x, x.next
            yield current

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return not self.empty()

    def __repr__(self):
        return f'CircularDoublyLinkedList([{", ".join(map(repr, self))}])'
