# tests/test_knowledge.py - Knowledge base tests
"""
Tests for the knowledge base snapshot and indexer.
"""
import pytest

from beancomp.knowledge import DocumentData, KnowledgeBase, KnowledgeIndexer

from fakes import FakeNode, FakeTree, TRANSACTION_TEXT, transaction_tree


class TestDocumentData:
    """Tests for the DocumentData class."""

    def test_create_deduplicates_in_order(self):
        """Test duplicates are dropped keeping first-seen order."""
        data = DocumentData.create(
            accounts=["B", "A", "B", "C", "A"],
            strings=['"x"', '"x"'],
        )
        assert data.accounts == ("B", "A", "C")
        assert data.strings == ('"x"',)

    def test_dict_round_trip(self):
        """Test conversion to and from dictionaries."""
        data = DocumentData.create(accounts=["Assets:Cash"], strings=['"Shop"'])
        assert DocumentData.from_dict(data.to_dict()) == data


class TestKnowledgeBase:
    """Tests for the KnowledgeBase class."""

    def test_documents_read_only(self, knowledge):
        """Test the document mapping cannot be modified."""
        with pytest.raises(TypeError):
            knowledge.documents["file:///new.beancount"] = DocumentData()

    def test_source_mapping_changes_do_not_leak(self):
        """Test the snapshot copies its input mapping."""
        source = {"a": DocumentData.create(accounts=["Assets:Cash"])}
        knowledge = KnowledgeBase(source)
        source["b"] = DocumentData.create(accounts=["Assets:Bank"])

        assert list(knowledge) == ["a"]

    def test_with_document_returns_new_snapshot(self, knowledge):
        """Test adding a document leaves the original untouched."""
        updated = knowledge.with_document("c", DocumentData.create(accounts=["Equity:Open"]))

        assert "c" in updated
        assert "c" not in knowledge
        assert len(updated) == len(knowledge) + 1

    def test_without_document(self, knowledge):
        """Test removing a document."""
        updated = knowledge.without_document("file:///other.beancount")

        assert list(updated.iter_accounts()) == ["Assets:Bank", "Expenses:Food"]
        assert len(knowledge) == 2

    def test_iteration_keeps_duplicates(self, knowledge):
        """Test accounts repeated across documents are yielded each time."""
        assert list(knowledge.iter_accounts()).count("Assets:Bank") == 2

    def test_equality(self, knowledge):
        """Test snapshots with the same documents compare equal."""
        assert knowledge == KnowledgeBase(dict(knowledge.documents))
        assert knowledge != KnowledgeBase()


class TestKnowledgeIndexer:
    """Tests for the KnowledgeIndexer class."""

    def test_index_transaction(self):
        """Test accounts and transaction strings are collected."""
        data = KnowledgeIndexer().index(transaction_tree(), TRANSACTION_TEXT)

        assert data.accounts == ("Assets:Bank",)
        assert data.strings == ('"Shop"', '"Groceries"')

    def test_index_skips_other_strings(self):
        """Test strings outside txn_strings are not collected."""
        text = 'option "title" "Home"\n'
        root = FakeNode("file", (0, 0), (1, 0), [
            FakeNode("option", (0, 0), (0, 21), [
                FakeNode("string", (0, 7), (0, 14)),
                FakeNode("string", (0, 15), (0, 21)),
            ]),
        ])
        data = KnowledgeIndexer().index(FakeTree(root.bind(text)), text)

        assert data.strings == ()

    def test_index_document_order(self):
        """Test values keep document order and are deduplicated."""
        text = "Assets:B\nAssets:A\nAssets:B\n"
        root = FakeNode("file", (0, 0), (3, 0), [
            FakeNode("open", (0, 0), (0, 8), [FakeNode("account", (0, 0), (0, 8))]),
            FakeNode("open", (1, 0), (1, 8), [FakeNode("account", (1, 0), (1, 8))]),
            FakeNode("open", (2, 0), (2, 8), [FakeNode("account", (2, 0), (2, 8))]),
        ])
        data = KnowledgeIndexer().index(FakeTree(root.bind(text)), text)

        assert data.accounts == ("Assets:B", "Assets:A")

    def test_index_multibyte_text(self):
        """Test byte offsets after non-ASCII text slice the right values."""
        text = '"Café Ölmühle"\nAssets:Bank\n'
        width = len('"Café Ölmühle"'.encode("utf-8"))
        root = FakeNode("file", (0, 0), (2, 0), [
            FakeNode("txn_strings", (0, 0), (0, width), [
                FakeNode("string", (0, 0), (0, width)),
            ]),
            FakeNode("open", (1, 0), (1, 11), [FakeNode("account", (1, 0), (1, 11))]),
        ])
        data = KnowledgeIndexer().index(FakeTree(root.bind(text)), text)

        assert data.strings == ('"Café Ölmühle"',)
        assert data.accounts == ("Assets:Bank",)
