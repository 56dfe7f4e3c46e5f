# beancomp.completion.strategies - Suggestion generators
"""
Generators for the three completion strategies.
"""
from datetime import date

from loguru import logger

from beancomp.completion.items import CompletionItem
from beancomp.knowledge.base import KnowledgeBase

ACCOUNT_DETAIL = "Beancount Account"
STRING_DETAIL = ""


def add_one_month(day: date) -> date:
    """First day of the month after ``day``."""
    if day.month == 12:
        return date(day.year + 1, 1, 1)
    return date(day.year, day.month + 1, 1)


def sub_one_month(day: date) -> date:
    """First day of the month before ``day``."""
    if day.month == 1:
        return date(day.year - 1, 12, 1)
    return date(day.year, day.month - 1, 1)


def month_prefix(day: date) -> str:
    """Year-month prefix with trailing hyphen, e.g. "2024-06-"."""
    return f"{day.year:04d}-{day.month:02d}-"


class DateSuggester:
    """Suggests today's date and the current, previous and next month."""

    def suggest(self, today: date) -> list[CompletionItem]:
        """
        Build date suggestions.

        Args:
            today: Current date, supplied by the caller

        Returns:
            Four items: today, this month, prev month, next month
        """
        items = [
            CompletionItem(today.isoformat(), "today"),
            CompletionItem(month_prefix(today), "this month"),
            CompletionItem(month_prefix(sub_one_month(today)), "prev month"),
            CompletionItem(month_prefix(add_one_month(today)), "next month"),
        ]
        logger.debug(f"date suggestions {[i.label for i in items]}")
        return items


class AccountSuggester:
    """Suggests every account known in the workspace."""

    def suggest(self, knowledge: KnowledgeBase) -> list[CompletionItem]:
        return [
            CompletionItem(account, ACCOUNT_DETAIL)
            for account in knowledge.iter_accounts()
        ]


class StringSuggester:
    """Suggests every payee and narration string known in the workspace."""

    def suggest(self, knowledge: KnowledgeBase) -> list[CompletionItem]:
        return [
            CompletionItem(value, STRING_DETAIL)
            for value in knowledge.iter_strings()
        ]
