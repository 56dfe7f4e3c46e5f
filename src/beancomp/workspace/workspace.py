# beancomp.workspace.workspace - Open document management
"""
Manages the ledger documents of a workspace and hands out snapshots.
"""
from pathlib import Path
from typing import Iterable, Iterator, Optional
import hashlib

from loguru import logger

from beancomp.exceptions import BeancompError
from beancomp.knowledge.base import DocumentData, KnowledgeBase
from beancomp.knowledge.indexer import KnowledgeIndexer
from beancomp.workspace.document import LoadedDocument
from beancomp.workspace.snapshot import WorkspaceSnapshot


def compute_hash(text: str) -> str:
    """SHA256 of document text."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def path_to_uri(path: Path) -> str:
    """file:// URI for a path."""
    return path.resolve().as_uri()


class Workspace:
    """
    Manages a collection of open ledger documents.

    Features:
    - Open documents from text or load them from disk
    - Index cache integration
    - Immutable snapshots for completion requests
    """

    def __init__(
        self,
        parser=None,
        indexer: Optional[KnowledgeIndexer] = None,
        cache_manager=None,
        extensions: Iterable[str] = (".beancount", ".bean"),
    ):
        """
        Initialize workspace.

        Args:
            parser: Ledger parser, defaults to LedgerParser
            indexer: Knowledge indexer
            cache_manager: Optional cache manager for index results
            extensions: File suffixes picked up by load_directory
        """
        if parser is None:
            from beancomp.syntax.parser import LedgerParser
            parser = LedgerParser()

        self.documents: dict[str, LoadedDocument] = {}
        self._knowledge = KnowledgeBase()
        self.parser = parser
        self.indexer = indexer or KnowledgeIndexer()
        self.cache_manager = cache_manager
        self.extensions = list(extensions)

    def open(self, uri: str, text: str, path: Optional[Path] = None) -> LoadedDocument:
        """
        Open or replace a document from text.

        Args:
            uri: Document URI
            text: Document text
            path: Source file, if any

        Returns:
            LoadedDocument instance
        """
        tree = self.parser.parse(text)
        source_hash = compute_hash(text)

        data: Optional[DocumentData] = None
        from_cache = False
        if self.cache_manager:
            data = self.cache_manager.get(source_hash)
            from_cache = data is not None

        if data is None:
            data = self.indexer.index(tree, text)
            if self.cache_manager:
                self.cache_manager.put(source_hash, data)

        document = LoadedDocument(
            uri=uri,
            text=text,
            tree=tree,
            data=data,
            source_hash=source_hash,
            path=path,
            from_cache=from_cache,
        )
        self.documents[uri] = document
        self._knowledge = self._knowledge.with_document(uri, data)
        logger.debug(f"opened {document}")
        return document

    def load(self, path: Path) -> LoadedDocument:
        """
        Load a ledger file into the workspace.

        Args:
            path: Path to ledger file

        Returns:
            LoadedDocument instance
        """
        path = path.resolve()
        text = path.read_text(encoding="utf-8")
        return self.open(path_to_uri(path), text, path=path)

    def load_directory(self, directory: Path, recursive: bool = False) -> list[LoadedDocument]:
        """
        Load all ledger files in a directory.

        Args:
            directory: Directory to scan
            recursive: Search subdirectories

        Returns:
            List of loaded documents
        """
        files = directory.rglob("*") if recursive else directory.glob("*")

        loaded = []
        for path in sorted(files):
            if not path.is_file() or path.suffix not in self.extensions:
                continue
            try:
                loaded.append(self.load(path))
            except (OSError, UnicodeDecodeError, BeancompError) as e:
                logger.warning(f"skipping {path}: {e}")

        return loaded

    def close(self, uri: str) -> bool:
        """
        Close a document.

        Returns:
            True if the document was open
        """
        if self.documents.pop(uri, None) is None:
            return False
        self._knowledge = self._knowledge.without_document(uri)
        return True

    def get(self, uri: str) -> Optional[LoadedDocument]:
        return self.documents.get(uri)

    def __getitem__(self, uri: str) -> LoadedDocument:
        document = self.get(uri)
        if document is None:
            raise KeyError(f"Document '{uri}' not open")
        return document

    def __contains__(self, uri: str) -> bool:
        return uri in self.documents

    def __iter__(self) -> Iterator[LoadedDocument]:
        return iter(self.documents.values())

    def __len__(self) -> int:
        return len(self.documents)

    def knowledge(self) -> KnowledgeBase:
        """Knowledge base of the currently open documents."""
        return self._knowledge

    def snapshot(self) -> WorkspaceSnapshot:
        """
        Capture the current state for completion requests.

        Later open/close calls do not affect the returned snapshot.
        """
        return WorkspaceSnapshot(
            trees={uri: doc.tree for uri, doc in self.documents.items()},
            texts={uri: doc.text for uri, doc in self.documents.items()},
            knowledge=self.knowledge(),
        )
