"""
Debug utilities for inspecting SignalNode trees.

Copyright (c) 2026 R. Dunbar Poor, Andy Milburn and funcsynth contributors

MIT License
"""

from typing import Set

from funcsynth.signal_node import SignalNode


def format_node_tree(root: SignalNode) -> str:
    """
    Render a SignalNode tree as indented text, one node per line.

    Walks the tree by following inputs(). A node reached a second time is
    printed once more with a [shared] marker and not descended into again;
    shared subtrees break single ownership and should be clone()d.

    Example:
        from funcsynth import compile_mml, LegitInstrument
        from funcsynth.debug_utils import print_node_tree

        print_node_tree(compile_mml("cde", LegitInstrument()))
    """
    lines: list[str] = []
    _walk(root, 0, set(), lines)
    return "\n".join(lines)


def print_node_tree(root: SignalNode) -> None:
    """Print format_node_tree(root)."""
    print(format_node_tree(root))


def find_shared_nodes(root: SignalNode) -> list[SignalNode]:
    """
    Return every node reachable from root through more than one path.

    An empty list means the tree has single ownership throughout.
    """
    seen: Set[int] = set()
    shared: dict[int, SignalNode] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            shared[id(node)] = node
            continue
        seen.add(id(node))
        stack.extend(node.inputs())
    return list(shared.values())


def _walk(node: SignalNode, indent: int, visited: Set[int], lines: list[str]) -> None:
    prefix = "  " * indent
    if id(node) in visited:
        lines.append(f"{prefix}{node!r} [shared]")
        return
    visited.add(id(node))
    lines.append(f"{prefix}{node!r}")
    for child in node.inputs():
        _walk(child, indent + 1, visited, lines)
