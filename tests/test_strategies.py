# tests/test_strategies.py - Suggestion generator tests
"""
Tests for date, account and string suggestions.
"""
import pytest
from datetime import date

from beancomp.completion import AccountSuggester, CompletionItem, DateSuggester, StringSuggester
from beancomp.completion.strategies import add_one_month, sub_one_month
from beancomp.knowledge import DocumentData, KnowledgeBase


class TestDateSuggester:
    """Tests for the DateSuggester class."""

    def test_mid_year(self):
        """Test suggestions for an ordinary month."""
        items = DateSuggester().suggest(date(2024, 6, 30))

        assert items == [
            CompletionItem("2024-06-30", "today"),
            CompletionItem("2024-06-", "this month"),
            CompletionItem("2024-05-", "prev month"),
            CompletionItem("2024-07-", "next month"),
        ]

    def test_january_wraps_back(self):
        """Test January's previous month is December of the prior year."""
        items = DateSuggester().suggest(date(2023, 1, 15))

        assert [(i.label, i.detail) for i in items] == [
            ("2023-01-15", "today"),
            ("2023-01-", "this month"),
            ("2022-12-", "prev month"),
            ("2023-02-", "next month"),
        ]

    def test_december_wraps_forward(self):
        """Test December's next month is January of the following year."""
        items = DateSuggester().suggest(date(2023, 12, 31))

        assert items[2].label == "2023-11-"
        assert items[3].label == "2024-01-"

    @pytest.mark.parametrize("day", [date(2024, 1, 31), date(2024, 3, 31), date(2023, 5, 31)])
    def test_month_end_days(self, day):
        """Test month shifts from the 31st never overflow."""
        assert add_one_month(day).day == 1
        assert sub_one_month(day).day == 1

    def test_single_digit_padding(self):
        """Test year, month and day are zero padded."""
        items = DateSuggester().suggest(date(987, 2, 3))
        assert items[0].label == "0987-02-03"


class TestKnowledgeSuggesters:
    """Tests for account and string suggestions."""

    def test_accounts_from_all_documents(self, knowledge):
        """Test account labels come from every document in order."""
        items = AccountSuggester().suggest(knowledge)

        assert [i.label for i in items] == [
            "Assets:Bank", "Expenses:Food", "Liabilities:Card", "Assets:Bank",
        ]
        assert all(i.detail == "Beancount Account" for i in items)

    def test_account_set_is_union(self, knowledge):
        """Test the label set equals the union of account sets."""
        items = AccountSuggester().suggest(knowledge)
        expected = set()
        for data in knowledge.documents.values():
            expected |= set(data.accounts)
        assert {i.label for i in items} == expected

    def test_strings(self, knowledge):
        """Test strings have empty detail."""
        items = StringSuggester().suggest(knowledge)

        assert [i.label for i in items] == ['"Shop"', '"Groceries"', '"Rent"']
        assert all(i.detail == "" for i in items)

    def test_empty_knowledge(self):
        """Test an empty knowledge base gives an empty list."""
        assert AccountSuggester().suggest(KnowledgeBase()) == []
        assert StringSuggester().suggest(KnowledgeBase()) == []

    def test_document_without_strings(self):
        """Test documents without strings contribute nothing."""
        knowledge = KnowledgeBase({"a": DocumentData.create(accounts=["Assets:Cash"])})
        assert StringSuggester().suggest(knowledge) == []
