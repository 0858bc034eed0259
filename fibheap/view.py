from typing import Iterator

from .heap import FibHeap
from .node import Node


def walk(heap: FibHeap) -> Iterator[Node]:
    """
    Iterate over every node of a heap.

    Roots come in root list order, each followed by its descendants
    (pre-order).
    """
    stack = list(reversed(list(heap.root_list)))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(node.children)))


def heap_view(heap: FibHeap):
    """
    Build a treelib.Tree of the forest.

    The tree root stands for the heap itself, the heap roots hang below it.
    Call `.show()` on the result to print it.
    """
    from treelib import Tree

    ret = Tree()
    ret.create_node(tag=repr(heap), identifier='root')
    for node in walk(heap):
        parent = 'root' if node.parent is None else id(node.parent)
        tag = f'{node!r}*' if node.mark else repr(node)
        ret.create_node(tag=tag, identifier=id(node), parent=parent,
                        data=node)
    return ret
