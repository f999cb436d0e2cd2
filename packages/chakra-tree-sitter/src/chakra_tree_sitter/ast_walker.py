from typing import Callable, Iterable, List, Optional

from tree_sitter import Node


class ASTWalker:
    """Utilities for traversing and searching the TSX AST"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first, pre-order traversal of the AST.

        Uses an explicit stack so deeply nested trees (long operator chains,
        generated markup) do not hit the interpreter recursion limit.
        """
        stack = [node]
        while stack:
            current = stack.pop()
            callback(current)
            stack.extend(reversed(current.children))

    @staticmethod
    def find_parent_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first parent node of a specific type"""
        current = node.parent
        while current:
            if current.type == type_name:
                return current
            current = current.parent
        return None

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, type_name: str) -> List[Node]:
        """Find all descendant nodes of a specific type"""
        return ASTWalker.find_all_by_types(node, (type_name,))

    @staticmethod
    def find_all_by_types(node: Node, type_names: Iterable[str]) -> List[Node]:
        """Find all descendant nodes of any of the given types, in document order"""
        wanted = set(type_names)
        results = []

        def check(n):
            if n.type in wanted:
                results.append(n)

        ASTWalker.walk(node, check)
        return results

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        """Source text covered by a node (offsets are UTF-8 bytes)"""
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8")

    @staticmethod
    def get_line_prefix(node: Node, source: bytes | str) -> str:
        """Text between the start of the node's line and the node"""
        if isinstance(source, str):
            source = source.encode("utf-8")
        line_start = source.rfind(b"\n", 0, node.start_byte) + 1
        return source[line_start : node.start_byte].decode("utf-8")

    @staticmethod
    def get_column(node: Node, source: bytes | str) -> int:
        """Character column of the node start"""
        return len(ASTWalker.get_line_prefix(node, source))
