import logging
from dataclasses import dataclass

from google import genai
from openai import OpenAI

from config import Settings
from errors import MissingCredentialError

logger = logging.getLogger(__name__)


OPENAI_MODELS = (
    "gpt-3.5-turbo",
    "gpt-3.5-turbo-0125",
    "gpt-4",
    "gpt-4-0125-preview",
    "gpt-4o",
)

GEMINI_MODELS = (
    "gemini-pro",
    "gemini-1.5-pro-latest",
)


@dataclass(frozen=True)
class CompareTarget:
    provider: str
    model: str


# Compare mode always sends this pair, whatever provider/model is selected.
COMPARE_TARGETS = (
    CompareTarget("openai", "gpt-3.5-turbo"),
    CompareTarget("gemini", "gemini-pro"),
)


class ProviderAdapter:
    """Turns a (model, prompt) pair into completion text for one vendor.

    Subclasses set ``name`` and ``api_key_env`` and implement ``_complete``.
    The API key is passed in at construction; ``generate`` refuses to reach the
    vendor SDK when it is missing.
    """

    name: str = ""
    api_key_env: str = ""
    models: tuple[str, ...] = ()

    def __init__(self, api_key: str | None = None):
        self.api_key = (api_key or "").strip() or None

    @property
    def default_model(self) -> str | None:
        return self.models[0] if self.models else None

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingCredentialError(self.api_key_env)
        return self.api_key

    def generate(self, model: str, prompt: str) -> str:
        api_key = self.require_api_key()
        logger.info("Calling %s model=%s prompt_len=%d", self.name, model, len(prompt or ""))
        logger.debug("Prompt preview: %s", (prompt or "")[:1000])
        text = self._complete(api_key, model, prompt)
        logger.info("%s response received model=%s resp_len=%d", self.name, model, len(text))
        logger.debug("Response preview: %s", text[:1000])
        return text

    def _complete(self, api_key: str, model: str, prompt: str) -> str:
        raise NotImplementedError


class OpenAIAdapter(ProviderAdapter):
    name = "openai"
    api_key_env = "OPENAI_API_KEY"
    models = OPENAI_MODELS

    def _complete(self, api_key: str, model: str, prompt: str) -> str:
        client = OpenAI(api_key=api_key)
        completion = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        return completion.choices[0].message.content or ""


class GeminiAdapter(ProviderAdapter):
    name = "gemini"
    api_key_env = "GEMINI_API_KEY"
    models = GEMINI_MODELS

    def _complete(self, api_key: str, model: str, prompt: str) -> str:
        client = genai.Client(api_key=api_key)
        response = client.models.generate_content(model=model, contents=prompt)
        return response.text or ""


def build_providers(settings: Settings) -> dict[str, ProviderAdapter]:
    adapters = [
        OpenAIAdapter(api_key=settings.openai_api_key),
        GeminiAdapter(api_key=settings.gemini_api_key),
    ]
    return {adapter.name: adapter for adapter in adapters}


def model_catalog() -> dict[str, list[str]]:
    return {
        OpenAIAdapter.name: list(OpenAIAdapter.models),
        GeminiAdapter.name: list(GeminiAdapter.models),
    }
