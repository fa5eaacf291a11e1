from enum import Enum
from typing import List
import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel

import src.core.prompts as prompts
from src.core.constants import AppSettings, Messages
from src.guardrails.topic import TopicClassifier, default_classifier

# Module-level logger for observability
logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Failure outcomes of a relay call."""
    MISSING_INPUT = "missing_input"
    PROVIDER_CALL_FAILED = "provider_call_failed"
    MALFORMED_PROVIDER_RESPONSE = "malformed_provider_response"


class RelayResult(BaseModel):
    """Outcome of a single relay call.

    Off-topic queries are successful results carrying the refusal text.
    """
    text: str | None = None
    error: ErrorKind | None = None
    off_topic: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None


class CompletionRelay:
    """Forwards health questions to a chat model.

    The chat model handle is created once at startup and shared read-only
    across requests. Every failure is converted to a ``RelayResult`` so
    nothing escapes to the HTTP layer as an exception.
    """

    def __init__(
        self,
        llm: BaseChatModel,
        classifier: TopicClassifier = default_classifier,
        default_lang: str = AppSettings.DEFAULT_LANG,
    ):
        self.llm = llm
        self.classifier = classifier
        self.default_lang = default_lang
        self.prompt = ChatPromptTemplate.from_messages(
            [
                ("system", prompts.HEALTH_SYSTEM_PROMPT),
                ("human", prompts.USER_PROMPT),
            ]
        )

    def build_messages(self, query: str, lang: str | None = None) -> List[BaseMessage]:
        return self.prompt.format_messages(
            lang=lang or self.default_lang, query=query)

    async def respond(self, query: str | None, lang: str | None = None) -> RelayResult:
        if not query or not query.strip():
            return RelayResult(error=ErrorKind.MISSING_INPUT)

        if not self.classifier.classify(query):
            logger.info("Refusing off-topic query")
            return RelayResult(text=Messages.REFUSAL, off_topic=True)

        messages = self.build_messages(query, lang)

        try:
            response = await self.llm.ainvoke(messages)
        except Exception:
            logger.exception("Error calling chat provider")
            return RelayResult(error=ErrorKind.PROVIDER_CALL_FAILED)

        text = getattr(response, "content", None)
        if not isinstance(text, str) or not text:
            logger.error("Unexpected provider response structure: %r", response)
            return RelayResult(error=ErrorKind.MALFORMED_PROVIDER_RESPONSE)

        return RelayResult(text=text)
