from typing import Optional, Sequence
import logging

from src.guardrails.keywords import (
    HEALTH_KEYWORDS,
    MIN_STATEMENT_TOKENS,
    NON_HEALTH_KEYWORDS,
    QUESTION_WORDS,
)

logger = logging.getLogger(__name__)


def _first_match(text: str, phrases: Sequence[str]) -> Optional[str]:
    for phrase in phrases:
        if phrase in text:
            return phrase
    return None


class TopicClassifier:
    """Keyword-based health topic filter.

    Matching is case-insensitive substring membership, so "heartbeat"
    matches "heart" and "stockings" matches "stock". The exclusion list is
    always consulted first: a single non-health marker rejects the query
    no matter how many health markers it also contains.
    """

    def __init__(
        self,
        health_keywords: Sequence[str] = HEALTH_KEYWORDS,
        non_health_keywords: Sequence[str] = NON_HEALTH_KEYWORDS,
        question_words: Sequence[str] = QUESTION_WORDS,
    ):
        self.health_keywords = tuple(k.lower() for k in health_keywords)
        self.non_health_keywords = tuple(k.lower() for k in non_health_keywords)
        self.question_words = tuple(w.lower() for w in question_words)

    def has_question_word(self, query: str) -> bool:
        query_lower = query.lower()
        return any(word in query_lower for word in self.question_words)

    def classify(self, query: str) -> bool:
        query_lower = query.lower()

        rejected = _first_match(query_lower, self.non_health_keywords)
        if rejected is not None:
            logger.debug("Rejected by non-health marker %r", rejected)
            return False

        accepted = _first_match(query_lower, self.health_keywords)
        if accepted is not None:
            logger.debug("Accepted by health marker %r", accepted)
            return True

        if len(query.split()) < MIN_STATEMENT_TOKENS and not self.has_question_word(query):
            logger.debug("Rejected short statement without health markers")
            return False

        # Unmatched questions are rejected too; only keyword hits pass
        logger.debug("Rejected: no health markers found")
        return False


default_classifier = TopicClassifier()


def is_health_related(query: str) -> bool:
    return default_classifier.classify(query)
