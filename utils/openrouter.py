import logging

import requests

from utils.errors import MalformedResponseError, UpstreamAPIError

logger = logging.getLogger(__name__)

APP_TITLE = "QuizGenius AI"


class OpenRouterClient:
    """Single-shot client for the OpenRouter chat-completions endpoint."""

    def __init__(self, api_key, model, base_url="https://openrouter.ai/api/v1",
                 referer="https://quizgenius.app", timeout=60):
        self.api_key = api_key
        self.model = model
        self.url = f"{base_url.rstrip('/')}/chat/completions"
        self.referer = referer
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get("OPENROUTER_API_KEY"),
            model=config.get("OPENROUTER_MODEL", "anthropic/claude-3-haiku"),
            base_url=config.get("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"),
            referer=config.get("PUBLIC_APP_URL") or "https://quizgenius.app",
            timeout=config.get("OPENROUTER_TIMEOUT", 60),
        )

    def headers(self):
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
            "HTTP-Referer": self.referer,
            "X-Title": APP_TITLE,
        }

    def complete(self, system, prompt):
        """Send one system + user exchange and return the reply text."""
        body = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            "response_format": {"type": "json_object"},
        }

        logger.info("Calling OpenRouter model %s", self.model)
        try:
            response = requests.post(self.url, headers=self.headers(), json=body, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("OpenRouter request failed: %s", e)
            raise UpstreamAPIError("Failed to call OpenRouter API", detail=str(e)) from e

        if not response.ok:
            logger.error("OpenRouter API error %s: %s", response.status_code, response.text)
            raise UpstreamAPIError(
                "Failed to call OpenRouter API",
                status_code=response.status_code,
                detail=response.text,
            )

        try:
            return response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error("Unexpected OpenRouter response body: %s", response.text)
            raise MalformedResponseError("Failed to parse AI-generated questions") from e
