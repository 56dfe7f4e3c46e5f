# beancomp.knowledge.base - Known accounts and strings
"""
Immutable snapshot of accounts and transaction strings known per document.

Completion reads a snapshot; the indexer produces new snapshots when
documents change instead of mutating the one in use.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional


def _unique(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate keeping first-seen order."""
    return tuple(dict.fromkeys(values))


@dataclass(frozen=True)
class DocumentData:
    """Accounts and transaction strings found in one document."""
    accounts: tuple[str, ...] = ()
    strings: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        accounts: Iterable[str] = (),
        strings: Iterable[str] = (),
    ) -> "DocumentData":
        """Build from any iterables, dropping duplicates."""
        return cls(accounts=_unique(accounts), strings=_unique(strings))

    def to_dict(self) -> dict:
        return {
            "accounts": list(self.accounts),
            "strings": list(self.strings),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DocumentData":
        return cls.create(
            accounts=data.get("accounts", []),
            strings=data.get("strings", []),
        )


class KnowledgeBase:
    """
    Read-only mapping of document URI to DocumentData.

    Iteration order follows insertion order of the documents.
    """

    def __init__(self, documents: Optional[Mapping[str, DocumentData]] = None):
        self._documents = MappingProxyType(dict(documents or {}))

    @property
    def documents(self) -> Mapping[str, DocumentData]:
        return self._documents

    def with_document(self, uri: str, data: DocumentData) -> "KnowledgeBase":
        """Return a new snapshot with one document added or replaced."""
        documents = dict(self._documents)
        documents[uri] = data
        return KnowledgeBase(documents)

    def without_document(self, uri: str) -> "KnowledgeBase":
        """Return a new snapshot without one document."""
        documents = {k: v for k, v in self._documents.items() if k != uri}
        return KnowledgeBase(documents)

    def iter_accounts(self) -> Iterator[str]:
        """Yield every account of every document, duplicates included."""
        for data in self._documents.values():
            yield from data.accounts

    def iter_strings(self) -> Iterator[str]:
        """Yield every transaction string of every document."""
        for data in self._documents.values():
            yield from data.strings

    def get(self, uri: str) -> Optional[DocumentData]:
        return self._documents.get(uri)

    def __contains__(self, uri: str) -> bool:
        return uri in self._documents

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __eq__(self, other) -> bool:
        if not isinstance(other, KnowledgeBase):
            return NotImplemented
        return dict(self._documents) == dict(other._documents)

    def __repr__(self) -> str:
        return f"KnowledgeBase({len(self._documents)} documents)"
