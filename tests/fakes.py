# tests/fakes.py - Hand-built syntax trees
"""
Minimal stand-ins for tree-sitter nodes and trees.

Nodes are laid out by (row, column) points over a source text; byte
offsets are derived from the text so covered-text extraction behaves
like it does on real trees.
"""


def point_to_byte(text: str, point: tuple[int, int]) -> int:
    """Byte offset of a (row, column) point, column counted in bytes."""
    row, column = point
    lines = text.encode("utf-8").split(b"\n")
    return sum(len(line) + 1 for line in lines[:row]) + column


class FakeNode:
    """A syntax node with the navigation surface of tree_sitter.Node."""

    def __init__(self, type, start_point, end_point, children=(), is_named=True):
        self.type = type
        self.start_point = start_point
        self.end_point = end_point
        self.is_named = is_named
        self.children = list(children)
        self.parent = None
        self.start_byte = 0
        self.end_byte = 0
        for child in self.children:
            child.parent = self

    def bind(self, text: str) -> "FakeNode":
        """Compute byte offsets for this subtree from the source text."""
        self.start_byte = point_to_byte(text, self.start_point)
        self.end_byte = point_to_byte(text, self.end_point)
        for child in self.children:
            child.bind(text)
        return self

    @property
    def named_children(self):
        return [c for c in self.children if c.is_named]

    def _siblings_before(self):
        if self.parent is None:
            return []
        siblings = self.parent.children
        return siblings[:siblings.index(self)]

    @property
    def prev_sibling(self):
        before = self._siblings_before()
        return before[-1] if before else None

    @property
    def prev_named_sibling(self):
        before = [s for s in self._siblings_before() if s.is_named]
        return before[-1] if before else None

    def covers(self, start, end) -> bool:
        return self.start_point <= start and end <= self.end_point

    def named_descendant_for_point_range(self, start, end):
        # Like tree-sitter, answer with this node when nothing smaller covers
        node = self
        while True:
            inner = next(
                (c for c in node.named_children if c.covers(start, end)),
                None,
            )
            if inner is None:
                return node
            node = inner

    def __repr__(self) -> str:
        return f"FakeNode({self.type} {self.start_point}-{self.end_point})"


class FakeTree:
    """A parsed document."""

    def __init__(self, root_node: FakeNode):
        self.root_node = root_node


class FakeParser:
    """Returns prepared trees keyed by text."""

    def __init__(self, trees=None):
        self.trees = dict(trees or {})
        self.calls = 0

    def parse(self, text: str) -> FakeTree:
        self.calls += 1
        if text in self.trees:
            return self.trees[text]
        return FakeTree(FakeNode("file", (0, 0), (text.count("\n") + 1, 0)).bind(text))


TRANSACTION_TEXT = (
    '2023-01-15 * "Shop" "Groceries"\n'
    "  Assets:Bank  -10 USD\n"
)


def transaction_tree(text: str = TRANSACTION_TEXT) -> FakeTree:
    """
    Tree of a one-posting transaction, shaped like the Beancount grammar.

    file
      transaction
        date                 0:0-0:10
        txn                  0:11-0:12
        txn_strings          0:13-0:31
          string             0:13-0:19
          string             0:20-0:31
        posting_or_kv_list   1:0-2:0
          posting            1:2-1:22
            account          1:2-1:13
            incomplete_amount 1:15-1:22
    """
    root = FakeNode("file", (0, 0), (2, 0), [
        FakeNode("transaction", (0, 0), (2, 0), [
            FakeNode("date", (0, 0), (0, 10)),
            FakeNode("txn", (0, 11), (0, 12)),
            FakeNode("txn_strings", (0, 13), (0, 31), [
                FakeNode("string", (0, 13), (0, 19)),
                FakeNode("string", (0, 20), (0, 31)),
            ]),
            FakeNode("posting_or_kv_list", (1, 0), (2, 0), [
                FakeNode("posting", (1, 2), (1, 22), [
                    FakeNode("account", (1, 2), (1, 13)),
                    FakeNode("incomplete_amount", (1, 15), (1, 22)),
                ]),
            ]),
        ]),
    ])
    return FakeTree(root.bind(text))


def single_node_tree(text: str, kind: str, parent_kind: str = "file") -> FakeTree:
    """
    Tree where one node of ``kind`` spans the whole first line.

    The node sits under a ``parent_kind`` node, itself under the root.
    """
    width = len(text.split("\n")[0].encode("utf-8"))
    node = FakeNode(kind, (0, 0), (0, width))
    if parent_kind == "file":
        root = FakeNode("file", (0, 0), (1, 0), [node])
    else:
        root = FakeNode("file", (0, 0), (1, 0), [
            FakeNode(parent_kind, (0, 0), (0, width), [node]),
        ])
    return FakeTree(root.bind(text))
