from .bunch import Bunch
from .css import compile_selector, select_nodes
from .leaf import Leaf
from .nodes import (
    ROOT_TAG_NAME,
    is_document,
    is_element,
    is_node,
    looks_like_xml_tree,
)
from .sentinels import ABSENT

__all__ = [
    "ABSENT",
    "Bunch",
    "Leaf",
    "ROOT_TAG_NAME",
    "compile_selector",
    "is_document",
    "is_element",
    "is_node",
    "looks_like_xml_tree",
    "select_nodes",
]
