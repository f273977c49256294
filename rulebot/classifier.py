"""
Rule-based classifier combining normalization and the rule catalog.

Maps a free-text support message to the canned response of the
first matching category, or to the fallback response.
"""
import logging
from typing import Optional, Sequence, Tuple

from .catalog import FALLBACK, RULES
from .matching import first_match, normalize
from .types import CategoryRule, ResponseTemplate

logger = logging.getLogger(__name__)


class RuleClassifier:
    """
    Ordered keyword classifier for support messages.

    Rules are evaluated in declaration order and the first rule with
    any keyword contained in the normalized message wins. The rule
    list is frozen on construction and never changes afterwards, so a
    single instance can be shared by concurrent callers.

    Attributes:
        rules: Ordered tuple of category rules
        fallback: Response returned when no rule matches
    """

    def __init__(self, rules: Sequence[CategoryRule] = RULES,
                 fallback: ResponseTemplate = FALLBACK):
        self.rules = tuple(rules)
        self.fallback = fallback

    def match(self, message: Optional[str]) -> Optional[CategoryRule]:
        """
        Find the winning rule for a message.

        Args:
            message: Raw message text, or None

        Returns:
            The first matching rule, or None when the fallback applies
        """
        text = normalize(message)
        for rule in self.rules:
            if rule.matches(text):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("rule %s matched on %r", rule.name, first_match(text, rule.keywords))
                return rule
        logger.debug("no rule matched, using fallback")
        return None

    def resolve(self, message: Optional[str]) -> Tuple[Optional[CategoryRule], ResponseTemplate]:
        """Return the winning rule (None for the fallback) and its response."""
        rule = self.match(message)
        return rule, (rule.response if rule is not None else self.fallback)

    def classify(self, message: Optional[str]) -> ResponseTemplate:
        """
        Classify a message into a canned response.

        Never fails: empty or unmatched input resolves to the fallback.

        Examples:
            >>> RuleClassifier().classify("hi there").title
            'Hi! 👋'
            >>> RuleClassifier().classify("").title
            'Tell me a bit more'
        """
        return self.resolve(message)[1]

    def reply(self, message: Optional[str]) -> dict:
        """Classify and return the flat reply plus the structured fields."""
        return self.classify(message).as_payload()


_default = RuleClassifier()


def classify(message: Optional[str] = None) -> ResponseTemplate:
    """Classify a message with the built-in rule catalog."""
    return _default.classify(message)
