import argparse
import asyncio
import logging
import os
import sys
from dataclasses import dataclass
from typing import Iterable, Optional

import httpx
from dotenv import load_dotenv

from llm_providers import COMPARE_TARGETS, CompareTarget

logger = logging.getLogger(__name__)


DEFAULT_API_URL = "http://127.0.0.1:8000"
CHAT_PATH = "/api/chat"


class ChatClientError(RuntimeError):
    pass


@dataclass(frozen=True)
class PanelResult:
    provider: str
    model: str
    ok: bool
    text: str = ""
    error: str = ""

    @property
    def display(self) -> str:
        return self.text if self.ok else f"Error: {self.error}"


def get_api_url() -> str:
    load_dotenv()
    return (os.getenv("CHAT_API_URL") or "").strip() or DEFAULT_API_URL


def _read_chat_response(resp: httpx.Response) -> str:
    try:
        data = resp.json()
    except ValueError as exc:
        raise ChatClientError(f"HTTP {resp.status_code} - {resp.text[:500]}") from exc

    if resp.status_code >= 400:
        message = data.get("error") if isinstance(data, dict) else None
        raise ChatClientError(message or f"HTTP {resp.status_code}")
    if not isinstance(data, dict) or not isinstance(data.get("response"), str):
        raise ChatClientError("Chat response format is invalid; expected a 'response' string.")
    return data["response"]


def _failure_message(exc: Exception) -> str:
    return str(exc) or exc.__class__.__name__


def chat(
    provider: str,
    model: str,
    prompt: str,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> PanelResult:
    """Send one chat request and capture the outcome as a panel result."""
    url = base_url or get_api_url()
    logger.info("Chat request provider=%s model=%s prompt_len=%d", provider, model, len(prompt))
    try:
        with httpx.Client(base_url=url, timeout=timeout, transport=transport) as client:
            resp = client.post(CHAT_PATH, json={"provider": provider, "model": model, "prompt": prompt})
            text = _read_chat_response(resp)
    except (httpx.HTTPError, httpx.InvalidURL, ChatClientError) as exc:
        logger.warning("Chat request failed provider=%s model=%s: %s", provider, model, exc)
        return PanelResult(provider=provider, model=model, ok=False, error=_failure_message(exc))
    return PanelResult(provider=provider, model=model, ok=True, text=text)


async def _settle(client: httpx.AsyncClient, target: CompareTarget, prompt: str) -> PanelResult:
    try:
        resp = await client.post(
            CHAT_PATH,
            json={"provider": target.provider, "model": target.model, "prompt": prompt},
        )
        text = _read_chat_response(resp)
    except (httpx.HTTPError, httpx.InvalidURL, ChatClientError) as exc:
        logger.warning("Compare leg failed provider=%s model=%s: %s", target.provider, target.model, exc)
        return PanelResult(provider=target.provider, model=target.model, ok=False, error=_failure_message(exc))
    return PanelResult(provider=target.provider, model=target.model, ok=True, text=text)


async def compare(
    prompt: str,
    targets: Iterable[CompareTarget] = COMPARE_TARGETS,
    *,
    base_url: str | None = None,
    timeout: float | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[PanelResult]:
    """Fan the prompt out to every target concurrently.

    Each leg is settled on its own, so one failing provider never blanks the
    other's panel. Results come back in target order.
    """
    url = base_url or get_api_url()
    targets = list(targets)
    logger.info("Compare request targets=%d prompt_len=%d", len(targets), len(prompt))
    try:
        client = httpx.AsyncClient(base_url=url, timeout=timeout, transport=transport)
    except httpx.InvalidURL as exc:
        logger.warning("Compare request failed base_url=%s: %s", url, exc)
        return [
            PanelResult(provider=target.provider, model=target.model, ok=False, error=_failure_message(exc))
            for target in targets
        ]
    async with client:
        results = await asyncio.gather(*(_settle(client, target, prompt) for target in targets))
    return list(results)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a prompt to the multi-model chat API.")
    parser.add_argument("prompt", help="Prompt text")
    parser.add_argument("--url", default=None, help=f"API base URL (default: CHAT_API_URL or {DEFAULT_API_URL})")
    parser.add_argument("--provider", default="openai", choices=["openai", "gemini"])
    parser.add_argument("--model", default=None, help="Model name (default depends on provider)")
    parser.add_argument("--compare", action="store_true", help="Compare OpenAI vs Gemini side by side")
    parser.add_argument("--timeout", type=float, default=None, help="HTTP timeout in seconds")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if not args.prompt.strip():
        print("Prompt must not be blank.")
        return 2

    if args.compare:
        results = asyncio.run(compare(args.prompt, base_url=args.url, timeout=args.timeout))
        for result in results:
            print(f"== {result.provider} ({result.model}) ==")
            print(result.display)
            print()
        return 0 if all(result.ok for result in results) else 1

    model = args.model or ("gpt-3.5-turbo" if args.provider == "openai" else "gemini-pro")
    result = chat(args.provider, model, args.prompt, base_url=args.url, timeout=args.timeout)
    print(result.display)
    return 0 if result.ok else 1


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    raise SystemExit(main(sys.argv[1:]))
