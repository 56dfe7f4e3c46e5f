# beancomp.completion.context - Completion context classification
"""
Chooses the completion strategy for a located node.

Rules are checked in order and the first match wins:

1. A date trigger always selects date completion.
2. A node two levels below a posting_or_kv_list, left of the account
   column limit, selects account completion.
3. Otherwise the node kind decides:
   - ERROR starting with a double quote selects string completion
   - identifier selects account completion
   - string directly under txn_strings selects string completion
   - anything else selects nothing
"""
from enum import Enum
from typing import Optional

from loguru import logger

from beancomp.completion.trigger import Trigger
from beancomp.syntax.kinds import NodeKind
from beancomp.syntax.locator import NodeContext

# Postings are indented by a couple of spaces and the account follows
# directly, so a cursor left of this column is still on the account.
ACCOUNT_COLUMN_LIMIT = 10


class Strategy(Enum):
    """Completion strategies."""
    NONE = "none"
    DATE = "date"
    ACCOUNT = "account"
    STRING = "string"


class ContextClassifier:
    """Maps (node context, trigger, column) to a Strategy."""

    def __init__(self, account_column_limit: int = ACCOUNT_COLUMN_LIMIT):
        self.account_column_limit = account_column_limit

    def classify(
        self,
        context: NodeContext,
        trigger: Optional[Trigger],
        character: int,
    ) -> Strategy:
        """
        Select a strategy.

        Args:
            context: Node under the cursor
            trigger: Classified trigger
            character: Cursor column

        Returns:
            Selected Strategy (Strategy.NONE for no completion)
        """
        if trigger is Trigger.DATE:
            return Strategy.DATE

        grandparent = NodeKind.of(context.grandparent)
        if (
            grandparent is NodeKind.POSTING_OR_KV_LIST
            and character < self.account_column_limit
        ):
            logger.debug(f"posting account column at {character}")
            return Strategy.ACCOUNT

        return self._classify_kind(context)

    def _classify_kind(self, context: NodeContext) -> Strategy:
        """Select a strategy from the node kind alone."""
        kind = NodeKind.of(context.node)

        if kind is NodeKind.ERROR:
            if context.text.startswith('"'):
                return Strategy.STRING
            logger.debug(f"unquoted ERROR node {context.text!r}")
            return Strategy.NONE

        if kind is NodeKind.IDENTIFIER:
            # Not restricted to postings; identifiers elsewhere get accounts too.
            return Strategy.ACCOUNT

        if kind is NodeKind.STRING:
            if NodeKind.of(context.parent) is NodeKind.TXN_STRINGS:
                return Strategy.STRING
            return Strategy.NONE

        return Strategy.NONE
