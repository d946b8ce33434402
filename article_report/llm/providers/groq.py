"""Groq chat-completion provider for article summarization."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any

import httpx

from ...config import ProviderConfig
from ...errors import (
    EmptyResponse,
    MalformedSummary,
    ProtocolError,
    RemoteError,
    ServiceUnavailable,
    SummarizationError,
)
from ...logging_utils import get_logger, log_event, truncate_text
from ...types import ArticleSummary
from ..prompts import build_summary_request
from .base import SummaryProvider


GROQ_API_URL = "https://api.groq.com/openai/v1/chat/completions"

# Request parameters sent with every summarization call.
REQUEST_POLICY = MappingProxyType(
    {
        "model": "llama-3.1-8b-instant",
        "temperature": 1,
        "max_tokens": 1024,
        "top_p": 1,
        "stream": False,
        "response_format": {"type": "json_object"},
        "stop": None,
    }
)

llm_logger = get_logger("llm")


class GroqProvider(SummaryProvider):
    """Summarizes article text with a single Groq chat-completion call.

    The caller supplies the API key; the provider never looks up credentials
    on its own. Each call is one attempt with no retries.
    """

    def __init__(self, api_key: str, cfg: ProviderConfig | None = None):
        if not api_key:
            raise ValueError("Missing Groq API key")
        self.api_key = api_key
        self.cfg = cfg or ProviderConfig()

    def summarize(self, content: str, system_prompt: str) -> ArticleSummary:
        payload = build_summary_request(content, system_prompt, REQUEST_POLICY)
        try:
            body = self._post(payload)
        except httpx.HTTPError as exc:
            self._log_response("provider_error", str(exc))
            raise ServiceUnavailable(f"sending request: {type(exc).__name__}: {exc}") from exc

        try:
            summary = parse_summary_response(body)
        except SummarizationError as exc:
            self._log_response(type(exc).__name__, body)
            raise
        self._log_response("ok", body)
        return summary

    def _post(self, payload: dict[str, Any]) -> str:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }
        with httpx.Client(timeout=self.cfg.timeout_seconds, trust_env=self.cfg.trust_env) as client:
            resp = client.post(GROQ_API_URL, content=json.dumps(payload), headers=headers)
            return resp.text

    def _log_response(self, status: str, content: str) -> None:
        log_event(
            llm_logger,
            "LLM response",
            event="llm_summarize",
            status=status,
            model=REQUEST_POLICY["model"],
            raw_response=truncate_text(content),
        )


def parse_summary_response(body: str) -> ArticleSummary:
    """Turn a raw chat-completion response body into an ArticleSummary.

    The checks run in a fixed order: a structured error envelope wins over
    everything else, then the success envelope is validated, then the first
    choice's message content, itself a JSON-encoded string, is decoded into
    the summary object.

    Raises:
        RemoteError: The body is an error envelope with a message
        ProtocolError: The body is not a valid completion envelope
        EmptyResponse: The envelope has no choices
        MalformedSummary: The embedded content is not a summary object
    """
    error = _parse_error_envelope(body)
    if error is not None:
        raise error

    choices = _parse_choices(body)
    if not choices:
        raise EmptyResponse("no choices in response")

    return _parse_summary_content(choices[0]["message"]["content"])


def _parse_error_envelope(body: str) -> RemoteError | None:
    try:
        data = json.loads(body)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if not isinstance(error, dict) or not error.get("message"):
        return None
    return RemoteError(
        message=str(error["message"]),
        type=str(error.get("type") or ""),
        code=str(error.get("code") or ""),
        failed_generation=str(error.get("failed_generation") or ""),
    )


def _parse_choices(body: str) -> list[dict[str, Any]]:
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"unmarshaling response: {exc}") from exc
    if not isinstance(data, dict):
        raise ProtocolError("unmarshaling response: expected a JSON object")

    choices = data.get("choices")
    if choices is None:
        return []
    if not isinstance(choices, list):
        raise ProtocolError("unmarshaling response: 'choices' is not a list")
    for idx, choice in enumerate(choices):
        message = choice.get("message") if isinstance(choice, dict) else None
        if not isinstance(message, dict):
            raise ProtocolError(f"unmarshaling response: choice {idx} has no message object")
        content = message.get("content")
        if content is not None and not isinstance(content, str):
            raise ProtocolError(f"unmarshaling response: choice {idx} content is not a string")
    return choices


def _parse_summary_content(content: str | None) -> ArticleSummary:
    try:
        obj = json.loads(content or "")
    except json.JSONDecodeError as exc:
        raise MalformedSummary(f"unmarshaling article summary: {exc}") from exc
    if not isinstance(obj, dict):
        raise MalformedSummary("unmarshaling article summary: expected a JSON object")

    # null or absent fields decode to empty values; completeness is checked at export
    summary = _or_default(obj.get("summary"), "")
    keypoints = _or_default(obj.get("keypoints"), [])
    tags = _or_default(obj.get("tags"), [])
    if not isinstance(summary, str):
        raise MalformedSummary("unmarshaling article summary: 'summary' is not a string")
    for name, values in (("keypoints", keypoints), ("tags", tags)):
        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise MalformedSummary(
                f"unmarshaling article summary: '{name}' is not a list of strings"
            )
    return ArticleSummary(summary=summary, keypoints=list(keypoints), tags=list(tags))


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value
