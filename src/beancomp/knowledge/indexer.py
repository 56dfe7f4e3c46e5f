# beancomp.knowledge.indexer - Extract accounts and strings from a tree
"""
Walks a parsed ledger and collects the names completion offers.
"""
from loguru import logger

from beancomp.knowledge.base import DocumentData
from beancomp.syntax.kinds import NodeKind
from beancomp.syntax.locator import text_for_bytes


class KnowledgeIndexer:
    """
    Collects account names and transaction strings from a syntax tree.

    - every ``account`` node (open directives, postings, balances, ...)
    - every ``string`` node directly under ``txn_strings`` (payee, narration)

    Strings are kept as written, quotes included.
    """

    def index(self, tree, text: str) -> DocumentData:
        """
        Index one document.

        Args:
            tree: tree-sitter Tree (or anything with ``root_node``)
            text: Document text the tree was parsed from

        Returns:
            DocumentData with values in document order
        """
        source = text.encode("utf-8")
        accounts: list[str] = []
        strings: list[str] = []

        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            kind = NodeKind.of(node)
            if kind is NodeKind.ACCOUNT:
                accounts.append(text_for_bytes(source, node))
            elif kind is NodeKind.STRING and NodeKind.of(node.parent) is NodeKind.TXN_STRINGS:
                strings.append(text_for_bytes(source, node))
            # Reversed so the pop order follows the document
            stack.extend(reversed(node.named_children))

        data = DocumentData.create(accounts=accounts, strings=strings)
        logger.debug(
            f"indexed {len(data.accounts)} accounts, {len(data.strings)} strings"
        )
        return data
