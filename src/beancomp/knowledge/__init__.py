# beancomp.knowledge - Knowledge base of known accounts and strings
from beancomp.knowledge.base import DocumentData, KnowledgeBase
from beancomp.knowledge.indexer import KnowledgeIndexer

__all__ = [
    "DocumentData",
    "KnowledgeBase",
    "KnowledgeIndexer",
]
