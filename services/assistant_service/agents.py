from langchain_openai import ChatOpenAI
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from shared.config import settings


def build_llm():
    # ChatOpenAI reads OPENAI_API_KEY and fails fast without it, so it is built on first use
    return ChatOpenAI(model=settings.ASSISTANT_MODEL, temperature=0)

# -------------------------------
# TERM EXPLAINER
# -------------------------------
explain_prompt = ChatPromptTemplate.from_template(
    'Explain the legal property term "{term}" in simple, easy-to-understand English '
    "for a home buyer. Keep it under 50 words."
)

# -------------------------------
# TITLEBOT (CHAT)
# -------------------------------
chat_prompt = ChatPromptTemplate.from_messages([
    (
        "system",
        """
You are TitleBot, a helpful assistant for a property document ordering platform called TitleFlow.
You help users understand title searches, deposited plans, and dealings.
You do NOT give legal advice, but you explain terms clearly. Keep responses concise.
        """,
    ),
    MessagesPlaceholder(variable_name="history"),
    ("human", "{message}"),
])
