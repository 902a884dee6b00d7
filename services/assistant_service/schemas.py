from typing import List, Literal
from pydantic import BaseModel, Field

class ExplainRequest(BaseModel):
    term: str = Field(min_length=1)

class ExplainResponse(BaseModel):
    explanation: str

class ChatTurn(BaseModel):
    role: Literal["user", "model"]
    text: str

class ChatRequest(BaseModel):
    history: List[ChatTurn] = []
    message: str = Field(min_length=1)

class ChatResponse(BaseModel):
    response: str
