from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from api.chat.schemas import ChatRequest, ChatResponse, ErrorResponse
from errors import ChatError
from llm_providers import ProviderAdapter, model_catalog
from .service import dispatch_chat, get_providers

router = APIRouter(prefix="/api")


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def chat(
    request: ChatRequest | None = Body(default=None),
    providers: dict[str, ProviderAdapter] = Depends(get_providers),
):
    try:
        return dispatch_chat(request, providers)
    except ChatError as exc:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@router.get("/models")
def list_models() -> dict[str, list[str]]:
    return model_catalog()
