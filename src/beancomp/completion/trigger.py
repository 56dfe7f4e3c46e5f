# beancomp.completion.trigger - Trigger character handling
"""
Normalises the editor's trigger character.

Only the date trigger is honoured. It is the first digit of a year and
only means "new dated entry" at the very start of a line; anywhere else
it is ordinary text.
"""
from enum import Enum
from typing import Optional

from loguru import logger

# Character that starts a date, e.g. the "2" of "2024-01-01".
DATE_TRIGGER = "2"

# Largest cursor column at which the date trigger still counts. The
# cursor sits after the typed character, so column 1 is "typed at column 0".
DATE_TRIGGER_MAX_COLUMN = 1


class Trigger(Enum):
    """Trigger outcomes that select a strategy on their own."""
    DATE = "date"


class TriggerClassifier:
    """Decides whether a trigger character is meaningful at the cursor."""

    def __init__(self, date_trigger_max_column: int = DATE_TRIGGER_MAX_COLUMN):
        self.date_trigger_max_column = date_trigger_max_column

    def classify(
        self,
        trigger_character: Optional[str],
        character: int,
    ) -> Optional[Trigger]:
        """
        Classify a trigger character.

        Args:
            trigger_character: Character that triggered the request, if any
            character: Cursor column

        Returns:
            Trigger.DATE, or None when the request is not trigger driven
        """
        if trigger_character != DATE_TRIGGER:
            return None
        if character > self.date_trigger_max_column:
            logger.debug(f"ignoring date trigger at column {character}")
            return None
        logger.debug(f"date trigger at column {character}")
        return Trigger.DATE
