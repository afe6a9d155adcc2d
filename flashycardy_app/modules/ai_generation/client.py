"""
HTTP client for the text generation provider.

The provider is addressed through an ordered list of attempts, one per
(endpoint, auth strategy) pair. Attempts are tried in order until one
returns a 2xx response carrying text. A single deadline covers the whole
chain, so a slow first endpoint eats into the budget of the next ones.
"""

import time
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import requests

from ...core.error_handlers import AIServiceError
from ...core.logging_config import LOGGER_NAME, get_logger

logger = get_logger(f'{LOGGER_NAME}.ai')

AUTH_NONE = 'none'
AUTH_BEARER = 'bearer'
AUTH_X_API_KEY = 'x-api-key'
AUTH_STRATEGIES = (AUTH_NONE, AUTH_BEARER, AUTH_X_API_KEY)

DEFAULT_ENDPOINT_PATHS = ('/api/generate', '/v1/chat/completions')


@dataclass(frozen=True)
class ProviderAttempt:
    """One (endpoint, auth strategy) pair of the fallback chain."""

    endpoint: str
    auth_strategy: str = AUTH_NONE

    @property
    def is_chat(self) -> bool:
        return '/chat' in self.endpoint

    @property
    def is_openai_compatible(self) -> bool:
        return '/v1/' in self.endpoint

    def headers(self, api_key: str = '') -> dict:
        headers = {'Content-Type': 'application/json'}
        if self.auth_strategy == AUTH_BEARER:
            headers['Authorization'] = f'Bearer {api_key}'
        elif self.auth_strategy == AUTH_X_API_KEY:
            headers['x-api-key'] = api_key
        return headers


def build_attempts(
    base_urls: Iterable[str],
    endpoint_paths: Sequence[str] = DEFAULT_ENDPOINT_PATHS,
    api_key: str = '',
) -> List[ProviderAttempt]:
    """
    Expand base URLs × endpoint paths × auth strategies into attempts.

    Keyed strategies are only added when an API key is configured.
    """
    strategies = AUTH_STRATEGIES if api_key else (AUTH_NONE,)
    attempts = []
    for base_url in base_urls:
        base_url = base_url.rstrip('/')
        for path in endpoint_paths:
            endpoint = f"{base_url}/{path.lstrip('/')}"
            for strategy in strategies:
                attempts.append(ProviderAttempt(endpoint=endpoint, auth_strategy=strategy))
    return attempts


def extract_generated_text(body) -> Optional[str]:
    """Pull the generated text out of an Ollama or OpenAI-compatible body."""
    if not isinstance(body, dict):
        return None

    text = body.get('response')
    if not text and isinstance(body.get('message'), dict):
        text = body['message'].get('content')
    if not text and body.get('choices'):
        choice = body['choices'][0] or {}
        message = choice.get('message') or {}
        text = message.get('content') or choice.get('text')

    if isinstance(text, str) and text.strip():
        return text.strip()
    return None


class AIProviderClient:
    """Send prompts to the configured provider, walking the fallback chain."""

    def __init__(
        self,
        base_urls: Iterable[str],
        model: str,
        api_key: str = '',
        timeout: float = 600,
        temperature: float = 0.8,
        max_tokens: int = 4000,
        endpoint_paths: Sequence[str] = DEFAULT_ENDPOINT_PATHS,
    ):
        self.model = model
        self.api_key = api_key or ''
        self.timeout = float(timeout)
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.attempts = build_attempts(base_urls, endpoint_paths, self.api_key)

    @classmethod
    def from_config(cls, config) -> 'AIProviderClient':
        return cls(
            base_urls=config.get('AI_BASE_URLS') or ['http://127.0.0.1:11434'],
            model=config.get('AI_MODEL', 'gemma3:270m'),
            api_key=config.get('AI_API_KEY', ''),
            timeout=config.get('AI_TIMEOUT_SECONDS', 600),
            temperature=config.get('AI_TEMPERATURE', 0.8),
            max_tokens=config.get('AI_MAX_TOKENS', 4000),
            endpoint_paths=config.get('AI_ENDPOINT_PATHS') or DEFAULT_ENDPOINT_PATHS,
        )

    def build_payload(self, attempt: ProviderAttempt, prompt: str) -> dict:
        if attempt.is_openai_compatible:
            return {
                'model': self.model,
                'messages': [{'role': 'user', 'content': prompt}],
                'temperature': self.temperature,
                'max_tokens': self.max_tokens,
                'stream': False,
            }

        options = {'temperature': self.temperature, 'num_predict': self.max_tokens}
        if attempt.is_chat:
            return {
                'model': self.model,
                'messages': [{'role': 'user', 'content': prompt}],
                'stream': False,
                'options': options,
            }
        return {'model': self.model, 'prompt': prompt, 'stream': False, 'options': options}

    def generate(self, prompt: str) -> str:
        """
        Return the generated text for ``prompt``.

        Raises:
            AIServiceError: when no attempt produced text before the deadline.
        """
        deadline = time.monotonic() + self.timeout
        connection_failures = 0
        model_missing = False
        timed_out = False
        last_error = None

        for index, attempt in enumerate(self.attempts, start=1):
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                timed_out = True
                break

            logger.info(
                "AI attempt %s/%s: %s (auth=%s)", index, len(self.attempts),
                attempt.endpoint, attempt.auth_strategy,
            )
            try:
                response = requests.post(
                    attempt.endpoint,
                    json=self.build_payload(attempt, prompt),
                    headers=attempt.headers(self.api_key),
                    timeout=remaining,
                )
            except requests.exceptions.Timeout as exc:
                logger.warning("AI attempt timed out at %s: %s", attempt.endpoint, exc)
                timed_out = True
                last_error = str(exc)
                break
            except requests.exceptions.ConnectionError as exc:
                logger.warning("AI endpoint unreachable %s: %s", attempt.endpoint, exc)
                connection_failures += 1
                last_error = str(exc)
                continue
            except requests.exceptions.RequestException as exc:
                logger.warning("AI request failed at %s: %s", attempt.endpoint, exc)
                last_error = str(exc)
                continue

            if not 200 <= response.status_code < 300:
                body = (response.text or '')[:500]
                last_error = f"{response.status_code} - {body}"
                if response.status_code == 404 and 'model' in body.lower():
                    model_missing = True
                logger.warning("AI endpoint %s answered %s", attempt.endpoint, last_error)
                continue

            try:
                text = extract_generated_text(response.json())
            except ValueError:
                text = None
            if text:
                logger.info("AI attempt %s succeeded (%s chars)", index, len(text))
                return text

            last_error = 'empty response'
            logger.warning("AI endpoint %s returned no text", attempt.endpoint)

        raise self._failure(timed_out, model_missing, connection_failures, last_error)

    def _failure(self, timed_out, model_missing, connection_failures, last_error) -> AIServiceError:
        if timed_out:
            return AIServiceError(
                'AI generation timed out. The model is taking too long to respond. '
                'Try reducing the number of cards or try again later.',
                reason='timeout',
            )
        if model_missing:
            return AIServiceError(
                f'AI model not found. Please install it by running: ollama pull {self.model}',
                reason='model_not_found',
            )
        if self.attempts and connection_failures == len(self.attempts):
            return AIServiceError(
                'Could not connect to the AI provider. Please make sure Ollama is running '
                f'and the model is installed. Run: ollama pull {self.model}',
                reason='connection',
            )
        if last_error:
            return AIServiceError(f'Local AI generation failed: {last_error}', reason='provider_error')
        return AIServiceError('Failed to generate cards with AI', reason='no_attempts')
