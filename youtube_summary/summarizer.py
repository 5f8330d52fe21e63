"""Summarize transcripts and list models through the OpenRouter API."""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import openai
from openai import OpenAI

from youtube_summary.config import ResolvedConfig
from youtube_summary.errors import ApiRequestError

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = 'https://openrouter.ai/api/v1'
MAX_TOKENS = 4096
SYSTEM_PROMPT = "You are a helpful assistant that creates clear, structured summaries of video transcripts."


@dataclass(frozen=True)
class ModelEntry:
    id: str
    name: str
    context_length: Optional[int] = None
    prompt_price: Optional[str] = None
    completion_price: Optional[str] = None


def build_messages(prompt: str, transcript: str) -> List[dict]:
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": f"{prompt}\n\n---\n\nTranscript:\n{transcript}"},
    ]


def filter_models(models: List[ModelEntry], search: Optional[str] = None) -> List[ModelEntry]:
    """Keep models whose id or name contains ``search``, ignoring case."""
    if not search:
        return list(models)
    term = search.lower()
    return [m for m in models if term in m.id.lower() or term in m.name.lower()]


def _upstream_message(error: openai.APIStatusError) -> str:
    body = error.body
    if isinstance(body, dict):
        message = body.get('message')
        if message:
            return str(message)
    elif isinstance(body, str) and body:
        return body
    text = error.response.text if error.response is not None else ''
    return text or error.message


def _api_error(error: openai.OpenAIError, action: str) -> ApiRequestError:
    if isinstance(error, openai.APIStatusError):
        return ApiRequestError(
            f"API error ({error.status_code}): {_upstream_message(error)}",
            status_code=error.status_code,
        )
    return ApiRequestError(f"Failed to {action}: {error}")


def _field(item: Any, name: str) -> Any:
    # OpenRouter-specific fields (catalog details, in-body errors) are SDK extras
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def _body_error(error: Any) -> ApiRequestError:
    """Map an ``{"error": {...}}`` body returned with a 2xx status."""
    message = _field(error, 'message') or str(error)
    code = _field(error, 'code')
    if isinstance(code, str) and code.isdigit():
        code = int(code)
    if isinstance(code, int):
        return ApiRequestError(f"API error ({code}): {message}", status_code=code)
    return ApiRequestError(f"API error: {message}")


def _model_entry(item: Any) -> ModelEntry:
    model_id = _field(item, 'id')
    if not model_id:
        raise ApiRequestError("Failed to parse models response: entry without an id")
    pricing = _field(item, 'pricing') or {}
    return ModelEntry(
        id=model_id,
        name=_field(item, 'name') or model_id,
        context_length=_field(item, 'context_length'),
        prompt_price=_field(pricing, 'prompt'),
        completion_price=_field(pricing, 'completion'),
    )


class Summarizer:
    """OpenRouter client wrapper.

    The API key is bound when the client is built; use ``for_config`` so the
    key always comes from the resolved configuration.
    """

    def __init__(self, client):
        self.client = client

    @classmethod
    def for_api_key(cls, api_key: str, http_client=None) -> 'Summarizer':
        return cls(OpenAI(api_key=api_key, base_url=OPENROUTER_BASE_URL, max_retries=0,
                          http_client=http_client))

    @classmethod
    def for_config(cls, config: ResolvedConfig, http_client=None) -> 'Summarizer':
        return cls.for_api_key(config.api_key, http_client=http_client)

    def summarize(self, config: ResolvedConfig, transcript: str) -> str:
        """Send the transcript for summarization and return the first choice's text.

        Requests authenticate with the key the client was built with, not
        ``config.api_key``.
        """
        logger.debug("Model: %s", config.model)
        logger.debug("Transcript length: %d chars", len(transcript))
        logger.debug("Sending request to OpenRouter API...")

        try:
            response = self.client.chat.completions.create(
                model=config.model,
                max_tokens=MAX_TOKENS,
                messages=build_messages(config.prompt, transcript),
            )
        except openai.OpenAIError as e:
            raise _api_error(e, 'send request') from e

        choices = getattr(response, 'choices', None)
        if not choices:
            error = _field(response, 'error')
            if error:
                raise _body_error(error)
            raise ApiRequestError("Failed to parse response: no choices returned")
        message = getattr(choices[0], 'message', None)
        content = getattr(message, 'content', None)
        if content is None:
            raise ApiRequestError("Failed to parse response: first choice has no message content")

        logger.debug("Response received: %d chars", len(content))
        return content

    def list_models(self, search: Optional[str] = None) -> List[ModelEntry]:
        """Fetch the model catalog, optionally filtered by a search term."""
        logger.debug("Fetching models from OpenRouter API...")
        try:
            page = self.client.models.list()
        except openai.OpenAIError as e:
            raise _api_error(e, 'fetch models') from e

        data = getattr(page, 'data', None)
        if data is None:
            raise ApiRequestError("Failed to parse models response: missing data")

        models = filter_models([_model_entry(item) for item in data], search)
        logger.debug("Models matched: %d of %d", len(models), len(data))
        return models
