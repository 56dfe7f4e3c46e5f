# beancomp.completion.provider - Completion request handling
"""
Runs one completion request against a workspace snapshot.
"""
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from loguru import logger

from beancomp.completion.context import ACCOUNT_COLUMN_LIMIT, ContextClassifier, Strategy
from beancomp.completion.items import CompletionResult
from beancomp.completion.strategies import AccountSuggester, DateSuggester, StringSuggester
from beancomp.completion.trigger import DATE_TRIGGER_MAX_COLUMN, TriggerClassifier
from beancomp.exceptions import BeancompError, SnapshotError
from beancomp.syntax.locator import CursorPosition, SyntaxLocator
from beancomp.workspace.snapshot import WorkspaceSnapshot


@dataclass(frozen=True)
class CompletionRequest:
    """A completion request from the editor."""
    uri: str
    position: CursorPosition
    trigger_character: Optional[str] = None


class CompletionProvider:
    """
    Resolves completion requests.

    Holds no per-request state; one provider can serve any number of
    snapshots.
    """

    def __init__(
        self,
        clock: Callable[[], date] = date.today,
        date_trigger_max_column: int = DATE_TRIGGER_MAX_COLUMN,
        account_column_limit: int = ACCOUNT_COLUMN_LIMIT,
    ):
        """
        Initialize provider.

        Args:
            clock: Returns the current date for date suggestions
            date_trigger_max_column: Last column where the date trigger counts
            account_column_limit: Columns left of this are the posting account
        """
        self.clock = clock
        self.locator = SyntaxLocator()
        self.trigger_classifier = TriggerClassifier(date_trigger_max_column)
        self.context_classifier = ContextClassifier(account_column_limit)
        self.date_suggester = DateSuggester()
        self.account_suggester = AccountSuggester()
        self.string_suggester = StringSuggester()

    @classmethod
    def from_config(cls, config, clock: Callable[[], date] = date.today) -> "CompletionProvider":
        """Create a provider with thresholds from a Config."""
        return cls(
            clock=clock,
            date_trigger_max_column=config.date_trigger_max_column,
            account_column_limit=config.account_column_limit,
        )

    def complete(
        self,
        snapshot: WorkspaceSnapshot,
        request: CompletionRequest,
    ) -> CompletionResult:
        """
        Compute completions.

        Args:
            snapshot: Workspace state to complete against
            request: Completion request

        Returns:
            List of CompletionItem, or None for no completion

        Raises:
            SnapshotError: If the snapshot does not hold the document
        """
        uri = request.uri
        position = request.position
        logger.debug(f"completion {uri} at {position} trigger {request.trigger_character!r}")

        missing = snapshot.missing(uri)
        if missing:
            raise SnapshotError(uri, missing)

        trigger = self.trigger_classifier.classify(
            request.trigger_character, position.character
        )

        tree = snapshot.trees[uri]
        context = self.locator.locate(tree.root_node, snapshot.texts[uri], position)
        if context is None:
            return None

        strategy = self.context_classifier.classify(context, trigger, position.character)
        logger.debug(f"strategy {strategy.value}")

        if strategy is Strategy.DATE:
            return self.date_suggester.suggest(self.clock())
        if strategy is Strategy.ACCOUNT:
            return self.account_suggester.suggest(snapshot.knowledge)
        if strategy is Strategy.STRING:
            return self.string_suggester.suggest(snapshot.knowledge)
        return None

    def complete_or_empty(
        self,
        snapshot: WorkspaceSnapshot,
        request: CompletionRequest,
    ) -> CompletionResult:
        """
        Compute completions, turning failures into no completion.

        For servers that must keep the editing session alive.
        """
        try:
            return self.complete(snapshot, request)
        except BeancompError as e:
            logger.warning(f"completion failed: {e}")
            return None
