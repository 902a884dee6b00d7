import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda

from services.assistant_service import router as assistant_router
from services.assistant_service.service import (
    AssistantService,
    CHAT_UNAVAILABLE,
    EXPLAIN_EMPTY,
    EXPLAIN_UNAVAILABLE,
)
from services.assistant_service.schemas import ChatTurn


def _broken(_prompt):
    raise RuntimeError("model offline")


@pytest.mark.asyncio
async def test_explain_returns_model_text():
    service = AssistantService(llm=FakeListChatModel(responses=["A caveat is a warning on the title."]))
    assert await service.explain("caveat") == "A caveat is a warning on the title."


@pytest.mark.asyncio
async def test_explain_puts_term_in_prompt():
    seen = []

    def capture(prompt):
        seen.append(prompt.to_string())
        return AIMessage(content="ok")

    service = AssistantService(llm=RunnableLambda(capture))
    await service.explain("easement")

    assert '"easement"' in seen[0]
    assert "under 50 words" in seen[0]


@pytest.mark.asyncio
async def test_explain_empty_answer_falls_back():
    service = AssistantService(llm=RunnableLambda(lambda _: AIMessage(content="")))
    assert await service.explain("lot") == EXPLAIN_EMPTY


@pytest.mark.asyncio
async def test_explain_model_failure_falls_back():
    service = AssistantService(llm=RunnableLambda(_broken))
    assert await service.explain("lot") == EXPLAIN_UNAVAILABLE


@pytest.mark.asyncio
async def test_chat_sends_history_and_system_prompt():
    seen = []

    def capture(prompt):
        seen.extend(prompt.to_messages())
        return AIMessage(content="Happy to help.")

    service = AssistantService(llm=RunnableLambda(capture))
    history = [ChatTurn(role="user", text="hi"), ChatTurn(role="model", text="hello")]

    assert await service.chat(history, "what is a dealing?") == "Happy to help."
    assert [m.type for m in seen] == ["system", "human", "ai", "human"]
    assert "TitleBot" in seen[0].content
    assert seen[-1].content == "what is a dealing?"


@pytest.mark.asyncio
async def test_chat_model_failure_falls_back():
    service = AssistantService(llm=RunnableLambda(_broken))
    assert await service.chat([], "hello") == CHAT_UNAVAILABLE


@pytest.mark.asyncio
async def test_explain_endpoint(client, monkeypatch):
    monkeypatch.setattr(
        assistant_router.assistant_service, "_llm", FakeListChatModel(responses=["Plain words."])
    )

    resp = await client.post("/assistant/explain", json={"term": "covenant"})

    assert resp.status_code == 200
    assert resp.json() == {"explanation": "Plain words."}


@pytest.mark.asyncio
async def test_chat_endpoint(client, monkeypatch):
    monkeypatch.setattr(
        assistant_router.assistant_service, "_llm", FakeListChatModel(responses=["Sure."])
    )

    resp = await client.post(
        "/assistant/chat",
        json={"history": [{"role": "user", "text": "hi"}], "message": "help"},
    )

    assert resp.status_code == 200
    assert resp.json() == {"response": "Sure."}


@pytest.mark.asyncio
async def test_explain_endpoint_rejects_empty_term(client):
    resp = await client.post("/assistant/explain", json={"term": ""})
    assert resp.status_code == 422
