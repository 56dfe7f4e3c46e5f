# beancomp.completion.items - Completion result types
"""
Completion items returned to the caller.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompletionItem:
    """A single suggestion."""
    label: str
    detail: str = ""

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "detail": self.detail,
        }


# None means "no completion"; an empty list is a valid, empty answer.
CompletionResult = Optional[list[CompletionItem]]
