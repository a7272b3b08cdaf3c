from dataclasses import dataclass
from typing import Any

import httpx

from recipe_finder.config import Settings
from recipe_finder.logging import get_logger
from recipe_finder.utils.timing import time_span

logger = get_logger(__name__)


class ChatCompletionError(Exception):
    """The provider answered 2xx but without a usable completion."""


@dataclass(frozen=True)
class LLMConfig:
    base_url: str
    api_key: str
    model: str
    temperature: float = 0.7
    max_tokens: int = 1000
    timeout_s: float = 30.0

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMConfig":
        return cls(
            base_url=settings.llm_base_url,
            api_key=settings.llm_api_key,
            model=settings.llm_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout_s=float(settings.llm_timeout_s),
        )


class ChatCompletionClient:
    """Single-shot client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }

    def build_payload(self, prompt: str, json_mode: bool = True) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self._config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
        }
        if json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    async def complete(self, prompt: str, *, prompt_name: str, json_mode: bool = True) -> str:
        """POST one prompt and return choices[0].message.content. Raises on any failure."""
        if not self._config.api_key:
            logger.warning("llm.api_key_missing name=%s", prompt_name)
        logger.info("llm.call.start name=%s model=%s", prompt_name, self._config.model)
        with time_span("llm.call", prompt=prompt_name, model=self._config.model):
            async with httpx.AsyncClient(timeout=self._config.timeout_s) as client:
                resp = await client.post(
                    self._config.base_url,
                    headers=self._headers(),
                    json=self.build_payload(prompt, json_mode=json_mode),
                )
                resp.raise_for_status()
                data = resp.json()
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise ChatCompletionError(f"no completion in response: {exc!r}") from exc
        if not isinstance(content, str):
            raise ChatCompletionError(f"completion is {type(content).__name__}, expected str")
        return content
