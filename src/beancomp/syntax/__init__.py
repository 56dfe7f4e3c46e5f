# beancomp.syntax - Syntax tree access
from beancomp.syntax.kinds import NodeKind
from beancomp.syntax.locator import (
    CursorPosition,
    NodeContext,
    SyntaxLocator,
    SyntaxNode,
    covers,
    text_for_bytes,
    text_for_node,
)

# LedgerParser lives in beancomp.syntax.parser and loads the grammar on import.

__all__ = [
    "NodeKind",
    "CursorPosition",
    "NodeContext",
    "SyntaxLocator",
    "SyntaxNode",
    "covers",
    "text_for_bytes",
    "text_for_node",
]
