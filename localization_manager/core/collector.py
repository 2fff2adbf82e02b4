"""
Call-site collection over a syntax tree.
"""
from typing import Callable, List

from tree_sitter import Node


def collect(root: Node, matches: Callable[[Node], bool]) -> List[Node]:
    """
    Collect every top-level node accepted by `matches`, in source order.

    A matched node is kept and its subtree is not searched any further, so a
    localize call passed as an argument of another localize call is never
    reported twice. Unmatched nodes are searched depth-first.
    """
    result: List[Node] = []
    # Children are pushed in reverse to keep source order
    stack = [root]
    while stack:
        node = stack.pop()
        if matches(node):
            result.append(node)
            continue
        stack.extend(reversed(node.children))
    return result
