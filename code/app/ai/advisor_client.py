import logging
import os
from typing import Any, Dict, List
from urllib.parse import urlparse, urlunparse

import requests
from dotenv import load_dotenv
from openai import OpenAI

load_dotenv()

logger = logging.getLogger(__name__)

ADVISOR_BASE_URL = os.getenv("ADVISOR_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/")
ADVISOR_MODEL = os.getenv("ADVISOR_MODEL", "gemini-2.5-flash")
ADVISOR_PLAN_MODEL = os.getenv("ADVISOR_PLAN_MODEL", "gemini-2.5-pro")
ADVISOR_TIMEOUT = float(os.getenv("ADVISOR_TIMEOUT", "60"))
ADVISOR_HEALTH_TIMEOUT = float(os.getenv("ADVISOR_HEALTH_TIMEOUT", "1.0"))
ADVISOR_MAX_RETRIES = max(0, int(os.getenv("ADVISOR_MAX_RETRIES", "0")))
ADVISOR_API_KEY = os.getenv("ADVISOR_API_KEY") or os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY")
ADVISOR_DEFAULT_MAX_TOKENS = int(os.getenv("ADVISOR_DEFAULT_MAX_TOKENS", "1200"))
# Provider tool that grounds replies in live web results; empty disables it.
ADVISOR_SEARCH_TOOL = os.getenv("ADVISOR_SEARCH_TOOL", "google_search")


class AdvisorUnavailable(RuntimeError):
    """No API key is configured for the advisory model."""


def has_api_key() -> bool:
    return bool(ADVISOR_API_KEY)


def _base_url() -> str:
    parsed = urlparse(ADVISOR_BASE_URL)
    path = parsed.path.rstrip("/")
    if path.endswith("/chat/completions"):
        path = path[: -len("/chat/completions")]
    base = parsed._replace(path=path, params="", query="", fragment="")
    return urlunparse(base)


def _get_client() -> OpenAI:
    return OpenAI(base_url=_base_url(), api_key=ADVISOR_API_KEY, max_retries=ADVISOR_MAX_RETRIES)


def check_advisor_online(timeout: float | None = None) -> bool:
    base = _base_url().rstrip("/")
    health_timeout = timeout if timeout is not None else ADVISOR_HEALTH_TIMEOUT
    headers = {"Authorization": f"Bearer {ADVISOR_API_KEY}"} if ADVISOR_API_KEY else {}
    try:
        resp = requests.get(f"{base}/models", timeout=health_timeout, headers=headers)
    except requests.RequestException as exc:
        logger.info("Advisor endpoint unreachable: %s", exc)
        return False
    # Auth errors still prove the endpoint is up.
    return resp.status_code < 500


def query_advisor(
    prompt: str,
    model: str | None = None,
    max_tokens: int | None = None,
    temperature: float | None = None,
    reasoning_effort: str | None = None,
    search: bool = False,
) -> Dict[str, Any]:
    if not ADVISOR_API_KEY:
        raise AdvisorUnavailable("Missing ADVISOR_API_KEY. Set the environment variable and restart the app.")

    client = _get_client()
    kwargs: Dict[str, Any] = {
        "model": model or ADVISOR_MODEL,
        "messages": [{"role": "user", "content": prompt}],
        "temperature": 0.3 if temperature is None else float(temperature),
        "max_tokens": int(max_tokens) if max_tokens is not None else ADVISOR_DEFAULT_MAX_TOKENS,
        "timeout": ADVISOR_TIMEOUT,
    }
    if reasoning_effort:
        kwargs["reasoning_effort"] = reasoning_effort
    if search and ADVISOR_SEARCH_TOOL:
        kwargs["extra_body"] = {"tools": [{ADVISOR_SEARCH_TOOL: {}}]}

    logger.debug("Querying %s (%d prompt chars)", kwargs["model"], len(prompt))
    response = client.chat.completions.create(**kwargs)
    try:
        return response.model_dump()
    except AttributeError:
        return response  # type: ignore[return-value]


def _first_message(response: Dict[str, Any]) -> Dict[str, Any] | None:
    choices = response.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message")
    return message if isinstance(message, dict) else None


def extract_text(response: Dict[str, Any]) -> str:
    message = _first_message(response)
    if message is None:
        return ""
    content = message.get("content")
    if isinstance(content, str) and content.strip():
        return content.strip()
    return ""


def _grounding_chunks(response: Dict[str, Any], message: Dict[str, Any]) -> List[Dict[str, Any]]:
    choice = (response.get("choices") or [{}])[0]
    for holder in (message, choice, response):
        metadata = holder.get("grounding_metadata") or holder.get("groundingMetadata")
        if isinstance(metadata, dict):
            return metadata.get("grounding_chunks") or metadata.get("groundingChunks") or []
    return []


def extract_citations(response: Dict[str, Any]) -> List[Dict[str, str]]:
    """Collect (url, title) sources from url_citation annotations and search grounding chunks."""
    message = _first_message(response)
    if message is None:
        return []
    candidates = []
    for annotation in message.get("annotations") or []:
        if isinstance(annotation, dict) and annotation.get("type") == "url_citation":
            citation = annotation.get("url_citation") or {}
            candidates.append((citation.get("url"), citation.get("title")))
    for chunk in _grounding_chunks(response, message):
        web = chunk.get("web") if isinstance(chunk, dict) else None
        if isinstance(web, dict):
            candidates.append((web.get("uri"), web.get("title")))

    sources: List[Dict[str, str]] = []
    seen = set()
    for url, title in candidates:
        if not url or not title or url in seen:
            continue
        seen.add(url)
        sources.append({"url": url, "title": title})
    return sources
