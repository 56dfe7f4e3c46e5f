# beancomp.syntax.parser - tree-sitter Beancount parser
"""
Thin wrapper over tree-sitter with the Beancount grammar.
"""
from pathlib import Path

import tree_sitter_beancount
from loguru import logger
from tree_sitter import Language, Parser, Tree

from beancomp.exceptions import LedgerParseError

BEANCOUNT_LANGUAGE = Language(tree_sitter_beancount.language())


class LedgerParser:
    """
    Parses Beancount ledgers into tree-sitter trees.

    Malformed input still produces a tree; the grammar marks the
    broken spans with ERROR nodes.
    """

    def __init__(self):
        self._parser = Parser(BEANCOUNT_LANGUAGE)

    def parse(self, text: str) -> Tree:
        """
        Parse ledger text.

        Args:
            text: Ledger source

        Returns:
            tree-sitter Tree
        """
        tree = self._parser.parse(text.encode("utf-8"))
        if tree is None:
            raise LedgerParseError("tree-sitter returned no tree")
        if tree.root_node.has_error:
            logger.debug("parsed tree contains ERROR nodes")
        return tree

    def parse_file(self, path: Path) -> Tree:
        """
        Parse a ledger file.

        Args:
            path: Path to ledger file

        Returns:
            tree-sitter Tree
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise LedgerParseError(f"Cannot read {path}", cause=e)
        return self.parse(text)
