from .config import set_debug
from .errors import InvalidKeyError
from .graph import (dijkstra, distance_matrix, minimum_spanning_tree,
                    shortest_path)
from .heap import FibHeap
from .linked_list import CircularDoublyLinkedList, Sentinel
from .node import Node
from .version import __version__
from .view import heap_view, walk
