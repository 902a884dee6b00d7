from typing import List

import structlog
from langchain_core.messages import AIMessage, HumanMessage

from shared.config import settings
from shared.observability import titleflow_llm_requests_total
from .agents import build_llm, explain_prompt, chat_prompt
from .schemas import ChatTurn

logger = structlog.get_logger(__name__)

EXPLAIN_EMPTY = "I couldn't generate an explanation at this time."
EXPLAIN_UNAVAILABLE = "Service currently unavailable."
CHAT_UNAVAILABLE = "I'm having trouble connecting right now. Please try again later."


def _text(message) -> str:
    content = getattr(message, "content", "")
    if isinstance(content, list):
        # Some providers return content blocks
        content = "".join(part.get("text", "") if isinstance(part, dict) else str(part) for part in content)
    return content or ""


class AssistantService:
    def __init__(self, llm=None):
        self._llm = llm

    @property
    def llm(self):
        if self._llm is None:
            self._llm = build_llm()
        return self._llm

    async def explain(self, term: str) -> str:
        try:
            result = await (explain_prompt | self.llm).ainvoke({"term": term})
        except Exception as e:
            # The assistant is a side widget: a broken model must not break the storefront
            logger.error("assistant_explain_failed", term=term, error=str(e))
            titleflow_llm_requests_total.labels(model=settings.ASSISTANT_MODEL, kind="explain", outcome="error").inc()
            return EXPLAIN_UNAVAILABLE

        titleflow_llm_requests_total.labels(model=settings.ASSISTANT_MODEL, kind="explain", outcome="ok").inc()
        return _text(result) or EXPLAIN_EMPTY

    async def chat(self, history: List[ChatTurn], message: str) -> str:
        turns = [
            HumanMessage(content=turn.text) if turn.role == "user" else AIMessage(content=turn.text)
            for turn in history
        ]
        try:
            result = await (chat_prompt | self.llm).ainvoke({"history": turns, "message": message})
        except Exception as e:
            logger.error("assistant_chat_failed", error=str(e))
            titleflow_llm_requests_total.labels(model=settings.ASSISTANT_MODEL, kind="chat", outcome="error").inc()
            return CHAT_UNAVAILABLE

        titleflow_llm_requests_total.labels(model=settings.ASSISTANT_MODEL, kind="chat", outcome="ok").inc()
        return _text(result)
