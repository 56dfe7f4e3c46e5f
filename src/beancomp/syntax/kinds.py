# beancomp.syntax.kinds - Grammar node kinds
"""
Node kinds of the tree-sitter Beancount grammar that completion looks at.
"""
from enum import Enum
from typing import Optional


class NodeKind(str, Enum):
    """Closed set of node kinds with a meaning for completion."""

    ERROR = "ERROR"
    IDENTIFIER = "identifier"
    STRING = "string"
    ACCOUNT = "account"
    TXN_STRINGS = "txn_strings"
    POSTING_OR_KV_LIST = "posting_or_kv_list"

    @classmethod
    def of(cls, node) -> Optional["NodeKind"]:
        """
        Map a node to its kind.

        Args:
            node: Syntax node or None

        Returns:
            NodeKind, or None for a missing node or a kind not listed here
        """
        if node is None:
            return None
        try:
            return cls(node.type)
        except ValueError:
            return None
