"""Graph views, capability tables, bags and concrete graph representations."""

from .bags import Bag, HeapBag, QueueBag, StackBag
from .base import (
    GraphView,
    divisors_graph,
    make,
    make_labelled_tuple,
    make_tuple,
    of_dict,
    of_fun,
    of_list,
)
from .mutable import HashMutableGraph, MutableGraph
from .persistent import OrderedMap, PersistentGraph
from .tables import (
    AttributeTagSet,
    HashTable,
    MapTable,
    Table,
    TableTagSet,
    TagSet,
    mk_map,
    mk_table,
)

__all__ = [
    "Bag",
    "HeapBag",
    "QueueBag",
    "StackBag",
    "GraphView",
    "divisors_graph",
    "make",
    "make_labelled_tuple",
    "make_tuple",
    "of_dict",
    "of_fun",
    "of_list",
    "HashMutableGraph",
    "MutableGraph",
    "OrderedMap",
    "PersistentGraph",
    "AttributeTagSet",
    "HashTable",
    "MapTable",
    "Table",
    "TableTagSet",
    "TagSet",
    "mk_map",
    "mk_table",
]
