# beancomp.syntax.locator - Cursor to syntax node resolution
"""
Resolves a cursor position to the innermost named syntax node covering it,
together with the neighbours completion needs.
"""
from dataclasses import dataclass
from typing import Optional, Protocol

from loguru import logger


class SyntaxNode(Protocol):
    """The part of ``tree_sitter.Node`` the locator reads."""

    @property
    def type(self) -> str: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def parent(self) -> Optional["SyntaxNode"]: ...

    @property
    def prev_sibling(self) -> Optional["SyntaxNode"]: ...

    @property
    def prev_named_sibling(self) -> Optional["SyntaxNode"]: ...

    def named_descendant_for_point_range(
        self, start: tuple[int, int], end: tuple[int, int]
    ) -> Optional["SyntaxNode"]: ...


@dataclass(frozen=True)
class CursorPosition:
    """Zero-based cursor position in the host protocol's units."""
    line: int
    character: int

    def __post_init__(self):
        if self.line < 0 or self.character < 0:
            raise ValueError(f"Invalid cursor position: {self}")

    def query_range(self) -> tuple[tuple[int, int], tuple[int, int]]:
        """
        Point range used to query the tree.

        Covers the character just before the cursor, or is zero-width
        at the start of a line.
        """
        start = (self.line, max(self.character - 1, 0))
        end = (self.line, self.character)
        return start, end

    def __str__(self) -> str:
        return f"{self.line}:{self.character}"


@dataclass(frozen=True)
class NodeContext:
    """The node under the cursor and its structural neighbours."""
    node: SyntaxNode
    text: str  # Document text covered by the node
    parent: Optional[SyntaxNode] = None
    grandparent: Optional[SyntaxNode] = None
    prev_sibling: Optional[SyntaxNode] = None
    prev_named_sibling: Optional[SyntaxNode] = None

    @property
    def kind(self) -> str:
        return self.node.type

    @property
    def parent_kind(self) -> Optional[str]:
        return self.parent.type if self.parent is not None else None

    @property
    def grandparent_kind(self) -> Optional[str]:
        return self.grandparent.type if self.grandparent is not None else None


def text_for_bytes(source: bytes, node: SyntaxNode) -> str:
    """Get the text covered by a node from the UTF-8 encoded document."""
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def text_for_node(text: str, node: SyntaxNode) -> str:
    """Get the document text covered by a node's byte range."""
    return text_for_bytes(text.encode("utf-8"), node)


def covers(node: SyntaxNode, start: tuple[int, int], end: tuple[int, int]) -> bool:
    """Whether the node's point range contains start..end."""
    return tuple(node.start_point) <= start and end <= tuple(node.end_point)


class SyntaxLocator:
    """Finds the node context for a cursor position."""

    def locate(
        self,
        root: SyntaxNode,
        text: str,
        position: CursorPosition,
    ) -> Optional[NodeContext]:
        """
        Locate the innermost named node covering the cursor.

        Args:
            root: Root node of the document tree
            text: Document text the tree was parsed from
            position: Cursor position

        Returns:
            NodeContext, or None if no node covers the position
        """
        start, end = position.query_range()
        logger.debug(f"query range {start} - {end}")

        # tree-sitter falls back to the root when nothing covers the range
        node = root.named_descendant_for_point_range(start, end)
        if node is None or not covers(node, start, end):
            logger.debug(f"no node at {position}")
            return None

        parent = node.parent
        grandparent = parent.parent if parent is not None else None
        context = NodeContext(
            node=node,
            text=text_for_node(text, node),
            parent=parent,
            grandparent=grandparent,
            prev_sibling=node.prev_sibling,
            prev_named_sibling=node.prev_named_sibling,
        )
        logger.debug(
            f"node {context.kind!r} text {context.text!r} "
            f"parent {context.parent_kind!r} grandparent {context.grandparent_kind!r}"
        )
        return context
