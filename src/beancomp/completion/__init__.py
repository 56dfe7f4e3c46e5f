# beancomp.completion - Completion resolution
from beancomp.completion.items import CompletionItem, CompletionResult
from beancomp.completion.trigger import Trigger, TriggerClassifier
from beancomp.completion.context import ContextClassifier, Strategy
from beancomp.completion.strategies import (
    AccountSuggester,
    DateSuggester,
    StringSuggester,
)
from beancomp.completion.provider import CompletionProvider, CompletionRequest

__all__ = [
    "CompletionItem",
    "CompletionResult",
    "Trigger",
    "TriggerClassifier",
    "ContextClassifier",
    "Strategy",
    "AccountSuggester",
    "DateSuggester",
    "StringSuggester",
    "CompletionProvider",
    "CompletionRequest",
]
