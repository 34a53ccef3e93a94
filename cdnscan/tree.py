"""CDN Scan - Path tree aggregation"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .models import PathNode

ROOT_NAME = "/"


class PathTree:
    """Prefix tree over URL path segments.

    Every insertion credits its byte count and one hit to each node on the
    traversed path, root included, so a directory's totals cover everything
    requested beneath it.
    """

    def __init__(self):
        self.root = PathNode(name=ROOT_NAME)

    def insert(self, segments: Sequence[str], byte_count: int) -> PathNode:
        """Record one request for the path given as segments, returns the leaf"""
        node = self.root
        node.record(byte_count)
        for segment in segments:
            # leading and doubled slashes produce empty segments
            if not segment:
                continue
            child = node.children.get(segment)
            if child is None:
                child = PathNode(name=segment)
                node.children[segment] = child
            child.record(byte_count)
            node = child
        return node

    def find(self, segments: Sequence[str]) -> Optional[PathNode]:
        node = self.root
        for segment in segments:
            if not segment:
                continue
            node = node.children.get(segment)
            if node is None:
                return None
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())

    def walk(self, order: str = 'insertion', prune: bool = False) -> Iterator[Tuple[str, PathNode]]:
        """Depth-first pre-order traversal yielding (full_path, node).

        The root comes first with an empty full path. With prune set, leaves
        hit only once and directories holding a single child are not yielded,
        though their descendants still are.
        """
        stack: List[Tuple[str, PathNode]] = [("", self.root)]
        while stack:
            path, node = stack.pop()
            if not (prune and node is not self.root and _is_noise(node)):
                yield path, node
            children = _ordered(node, order)
            for child in reversed(children):
                stack.append((f"{path}/{child.name}", child))


def _is_noise(node: PathNode) -> bool:
    if node.is_leaf:
        return node.total_hits <= 1
    return len(node.children) == 1


def _ordered(node: PathNode, order: str) -> List[PathNode]:
    children = list(node.children.values())
    if order == 'size':
        children.sort(key=lambda c: c.total_bytes, reverse=True)
    elif order == 'hits':
        children.sort(key=lambda c: c.total_hits, reverse=True)
    elif order != 'insertion':
        raise ValueError(f"Unknown ordering: {order}")
    return children
