"""
XAI RELAY SERVICE MODULE
========================

Forwards a single user message to the xAI chat completions API and returns
the reply text. Used by POST /api/chat. Each call is stateless: no history,
no system prompt, no streaming, one request per message and no retry.

FLOW:
  1. Check that an API key is configured (RelayConfigurationError otherwise).
  2. Check that the message is non-empty (RelayValidationError otherwise).
  3. POST the message with the fixed model, temperature and max_tokens.
  4. Non-2xx or transport failure -> RelayUpstreamError (status + body attached).
  5. Pull choices[0].message.content out of the JSON (RelayFormatError if absent).

The API key is only ever logged masked (first/last 4 characters).
"""

import json
import logging
from typing import Any, Optional

import requests

from config import (
    XAI_API_KEY,
    XAI_API_URL,
    XAI_MODEL,
    XAI_TEMPERATURE,
    XAI_MAX_TOKENS,
    XAI_TIMEOUT,
)

logger = logging.getLogger("GROK.CHAT")


# ==============================================================================
# ERRORS
# ==============================================================================

class RelayError(Exception):
    """Base class for everything get_response() can raise."""


class RelayConfigurationError(RelayError):
    pass


class RelayValidationError(RelayError):
    pass


class RelayUpstreamError(RelayError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class RelayFormatError(RelayError):
    pass


def mask_key(key: str) -> str:
    """Return a loggable form of an API key, e.g. 'xai-...9f2c'."""
    if len(key) <= 8:
        return "***"
    return f"{key[:4]}...{key[-4:]}"


# ==============================================================================
# XAI SERVICE CLASS
# ==============================================================================

class XaiService:
    """Thin client for the xAI chat completions endpoint."""

    def __init__(
        self,
        api_key: str = XAI_API_KEY,
        api_url: str = XAI_API_URL,
        model: str = XAI_MODEL,
        temperature: float = XAI_TEMPERATURE,
        max_tokens: int = XAI_MAX_TOKENS,
        timeout: float = XAI_TIMEOUT,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        if not api_key:
            logger.warning("XAI_API_KEY not set. /api/chat will answer with a configuration error.")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def build_payload(self, message: str) -> dict:
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": message}],
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    def get_response(self, message: Optional[str]) -> str:
        """Send `message` to xAI and return the assistant's reply text."""
        if not self.api_key:
            logger.error("XAI_API_KEY is not set")
            raise RelayConfigurationError("API key not configured")
        if not message:
            raise RelayValidationError("Message is required")

        logger.info("Sending request to xAI (model=%s, key=%s, %s chars)",
                    self.model, mask_key(self.api_key), len(message))
        try:
            response = requests.post(
                self.api_url,
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.api_key}",
                },
                json=self.build_payload(message),
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("Request to xAI failed: %s", e)
            raise RelayUpstreamError(f"xAI API request failed: {e}") from e

        logger.info("xAI response status: %s", response.status_code)
        response_text = response.text

        if not response.ok:
            # Error bodies are usually JSON but proxies may answer with plain text.
            try:
                error_data = json.loads(response_text)
            except ValueError:
                error_data = response_text
            logger.error("xAI API error: status=%s reason=%s error=%s",
                         response.status_code, response.reason, error_data)
            raise RelayUpstreamError(
                f"xAI API error: {response.status_code} {response.reason} - {json.dumps(error_data)}",
                status_code=response.status_code,
                body=error_data,
            )

        try:
            data = json.loads(response_text)
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise RelayFormatError("Invalid response format from xAI API") from e
        if not content:
            raise RelayFormatError("Invalid response format from xAI API")

        logger.info("xAI reply received (%s chars)", len(content))
        return content
