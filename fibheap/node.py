from .linked_list import CircularDoublyLinkedList

_MISSING = object()


class Node():
    """
    A node of a Fibonacci heap.

    `key` orders the node, `value` is an arbitrary payload and defaults to
    the key. `next` and `prev` place the node in whichever circular list
    currently holds it; a detached node links to itself.
    """
    __slots__ = ('key', 'value', 'degree', 'mark', 'parent', 'children',
                 'next', 'prev')

    def __init__(self, key, value=_MISSING):
        self.key, self.value = key, key if value is _MISSING else value
        self.degree, self.mark, self.parent = 0, False, None
        self.children = CircularDoublyLinkedList()
        self.next, self.prev = self, self

    def __repr__(self):
        if self.value is self.key:
            return f'Node({self.key!r})'
        return f'Node({self.key!r}, {self.value!r})'
