import pytest

from fibheap import CircularDoublyLinkedList, Node, Sentinel


def make_list(keys):
    lst = CircularDoublyLinkedList()
    nodes = [Node(k) for k in keys]
    for node in reversed(nodes):
        lst.insert(node)
    return lst, nodes


def walk_from_sentinel(lst):
    ret = []
    x = lst.sentinel.next
    while x is not lst.sentinel:
        ret.append(x)
        x = x.next
    assert lst.sentinel.prev is (ret[-1] if ret else lst.sentinel)
    return ret


def test_empty():
    lst = CircularDoublyLinkedList()
    assert lst.empty()
    assert not lst
    assert lst.head is None
    assert lst.tail is None
    assert list(lst) == []
    assert lst.sentinel.next is lst.sentinel.prev is lst.sentinel


def test_sentinel():
    s = Sentinel()
    assert s.next is s and s.prev is s


def test_insert_at_head():
    lst = CircularDoublyLinkedList()
    a, b = Node(1), Node(2)
    assert lst.insert(a) is a
    assert lst.head is a and lst.tail is a
    lst.insert(b)
    assert lst.head is b
    assert lst.tail is a
    assert list(lst) == [b, a]
    assert a.next is lst.sentinel
    assert b.prev is lst.sentinel


def test_traversal_visits_every_element():
    lst, nodes = make_list(range(5))
    assert walk_from_sentinel(lst) == nodes
    assert list(lst) == nodes
    assert len(lst) == 5


def test_delete():
    lst, (a, b, c) = make_list('abc')
    assert lst.delete(b) is b
    assert list(lst) == [a, c]
    assert a.next is c and c.prev is a
    assert b.next is b and b.prev is b

    lst.delete(a)
    lst.delete(c)
    assert lst.empty()


def test_delete_then_insert_elsewhere():
    lst, (a, b) = make_list('ab')
    other = CircularDoublyLinkedList()
    other.insert(lst.delete(a))
    assert list(lst) == [b]
    assert list(other) == [a]


def test_concat():
    left, xs = make_list(range(3))
    right, ys = make_list(range(3, 7))
    old = right.sentinel
    assert left.concat(right) is left
    assert list(left) == ys + xs
    assert len(set(map(id, left))) == 7
    assert walk_from_sentinel(left) == ys + xs
    assert right.empty()
    assert right.sentinel is not old
    assert all(node is not old for node in walk_from_sentinel(left))
    assert xs[-1].next is left.sentinel
    assert ys[0].prev is left.sentinel


@pytest.mark.parametrize('a, b', [(0, 0), (0, 2), (2, 0), (1, 1)])
def test_concat_sizes(a, b):
    left, xs = make_list(range(a))
    right, ys = make_list(range(b))
    left.concat(right)
    assert list(left) == ys + xs
    assert list(right) == []


def test_traversal_allows_moving_current():
    lst, nodes = make_list(range(4))
    other = CircularDoublyLinkedList()
    seen = []
    for node in lst:
        seen.append(node)
        other.insert(lst.delete(node))
    assert seen == nodes
    assert lst.empty()
    assert list(other) == nodes[::-1]


def test_traversal_is_lazy():
    lst, nodes = make_list(range(3))
    it = iter(lst)
    assert next(it) is nodes[0]
    lst.insert(Node(-1))
    assert list(it) == nodes[1:]


def test_repr():
    lst, _ = make_list([1, 2])
    assert repr(lst) == 'CircularDoublyLinkedList([Node(1), Node(2)])'
