from fastapi import APIRouter, Request
from shared.security import limiter
from .schemas import ExplainRequest, ExplainResponse, ChatRequest, ChatResponse
from .service import AssistantService

router = APIRouter()
assistant_service = AssistantService() # Initialize Service

@router.get("/health")
async def health_check():
    return {"service": "assistant", "status": "running"}


@router.post("/explain", response_model=ExplainResponse)
@limiter.limit("10/minute")  # Rate limit: 10 requests per minute per IP
async def explain_term(
    request: Request,           # REQUIRED: slowapi needs this to check IP/Headers
    payload: ExplainRequest
):
    explanation = await assistant_service.explain(payload.term)
    return ExplainResponse(explanation=explanation)


@router.post("/chat", response_model=ChatResponse)
@limiter.limit("10/minute")
async def chat_endpoint(
    request: Request,
    payload: ChatRequest
):
    response_text = await assistant_service.chat(payload.history, payload.message)
    return ChatResponse(response=response_text)
