import logging

from api.chat.schemas import ChatRequest, ChatResponse
from config import load_settings
from errors import ChatError, ProviderCallError, UnsupportedProviderError, ValidationError
from llm_providers import ProviderAdapter, build_providers

logger = logging.getLogger(__name__)


def get_providers() -> dict[str, ProviderAdapter]:
    return build_providers(load_settings())


def dispatch_chat(request: ChatRequest | None, providers: dict[str, ProviderAdapter]) -> ChatResponse:
    if request is None or not request.provider or not request.model or not request.prompt:
        raise ValidationError()

    adapter = providers.get(request.provider)
    if adapter is None:
        raise UnsupportedProviderError(request.provider)

    try:
        text = adapter.generate(request.model, request.prompt)
    except ChatError:
        logger.exception("Provider request failed provider=%s model=%s", request.provider, request.model)
        raise
    except Exception as exc:
        logger.exception("Provider request failed provider=%s model=%s", request.provider, request.model)
        raise ProviderCallError(request.provider, str(exc)) from exc

    return ChatResponse(response=text)
