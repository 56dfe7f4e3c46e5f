# beancomp.workspace.snapshot - Per-request workspace snapshot
"""
Read-only view of the workspace handed to a completion request.
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from beancomp.knowledge.base import KnowledgeBase


def _freeze(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class WorkspaceSnapshot:
    """
    Parsed trees, document texts and knowledge base of one workspace state.

    Trees and texts are expected to come from the same document revision;
    the snapshot does not check that.
    """
    trees: Mapping[str, Any] = field(default_factory=dict)
    texts: Mapping[str, str] = field(default_factory=dict)
    knowledge: KnowledgeBase = field(default_factory=KnowledgeBase)

    def __post_init__(self):
        object.__setattr__(self, "trees", _freeze(self.trees))
        object.__setattr__(self, "texts", _freeze(self.texts))

    def missing(self, uri: str) -> list[str]:
        """
        Name the parts of the snapshot that lack a document.

        Args:
            uri: Document URI

        Returns:
            Subset of ["trees", "texts", "knowledge"], empty if complete
        """
        missing = []
        if uri not in self.trees:
            missing.append("trees")
        if uri not in self.texts:
            missing.append("texts")
        if uri not in self.knowledge:
            missing.append("knowledge")
        return missing
