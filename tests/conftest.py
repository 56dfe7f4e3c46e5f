# tests/conftest.py - Pytest configuration
"""
Pytest configuration and shared fixtures.
"""
import pytest
from datetime import date
from pathlib import Path

from beancomp.knowledge import DocumentData, KnowledgeBase


# Fixture directory
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return path to fixtures directory."""
    return FIXTURES_DIR


@pytest.fixture
def sample_ledger():
    """Return path to sample.beancount."""
    return FIXTURES_DIR / "sample.beancount"


@pytest.fixture
def knowledge():
    """Knowledge base with two documents."""
    return KnowledgeBase({
        "file:///main.beancount": DocumentData.create(
            accounts=["Assets:Bank", "Expenses:Food"],
            strings=['"Shop"', '"Groceries"'],
        ),
        "file:///other.beancount": DocumentData.create(
            accounts=["Liabilities:Card", "Assets:Bank"],
            strings=['"Rent"'],
        ),
    })


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2023-01-15."""
    return lambda: date(2023, 1, 15)
