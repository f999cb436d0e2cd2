import logging
from pathlib import Path

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .ast_walker import ASTWalker
from .node_types import ParseResult

logger = logging.getLogger(__name__)


class TSXParser:
    """Thin wrapper around the tree-sitter TSX grammar"""

    def __init__(self):
        self.language = Language(tsts.language_tsx())
        self.parser = Parser(self.language)

    def parse_string(self, source: str | bytes) -> ParseResult:
        if isinstance(source, str):
            source = source.encode("utf-8")
        tree = self.parser.parse(source)
        errors = self._collect_errors(tree.root_node)
        if errors:
            logger.debug("Parsed source with %d syntax error(s)", len(errors))
        return ParseResult(tree=tree, source=source, errors=errors)

    def parse_file(self, file_path: Path) -> ParseResult:
        with open(file_path, "rb") as f:
            return self.parse_string(f.read())

    @staticmethod
    def _collect_errors(root: Node) -> list[str]:
        errors = []

        def check(node: Node):
            if node.type == "ERROR":
                row, column = node.start_point
                errors.append(f"Syntax error at {row + 1}:{column + 1}")
            elif node.is_missing:
                row, column = node.start_point
                errors.append(f"Missing '{node.type}' at {row + 1}:{column + 1}")

        if root.has_error:
            ASTWalker.walk(root, check)
        return errors
