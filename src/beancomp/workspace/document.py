# beancomp.workspace.document - Loaded document representation
"""
A ledger document held by the workspace, with its tree and index.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from beancomp.knowledge.base import DocumentData


@dataclass
class LoadedDocument:
    """
    A ledger document loaded into the workspace.

    Tracks loading metadata next to the parse and index results.
    """
    uri: str  # Document URI, file:// for documents read from disk
    text: str  # Document text
    tree: Any  # tree-sitter Tree parsed from text
    data: DocumentData  # Accounts and strings found in text
    source_hash: str  # SHA256 of text
    path: Optional[Path] = None  # Source file, if loaded from disk
    from_cache: bool = False  # Whether the index came from cache

    @property
    def lines(self) -> int:
        return self.text.count("\n") + 1 if self.text else 0

    def to_dict(self) -> dict:
        """Summary for JSON output."""
        return {
            "uri": self.uri,
            "path": str(self.path) if self.path else None,
            "lines": self.lines,
            "from_cache": self.from_cache,
            **self.data.to_dict(),
        }

    def __str__(self) -> str:
        cache_str = " (cached)" if self.from_cache else ""
        return (
            f"{self.uri}: {len(self.data.accounts)} accounts, "
            f"{len(self.data.strings)} strings{cache_str}"
        )
