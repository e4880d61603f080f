"""
Text generation backends for the plant's replies.

Two interchangeable backends are supported:
- LocalCompletionBackend: an OpenAI-compatible chat completions endpoint
  running locally (LM Studio by default)
- GeminiBackend: the hosted Gemini API

Both raise ReplyBackendError for any failure so callers can substitute a
fallback reply.
"""

import os
import logging
from typing import Any, Dict, List, Optional

import httpx
from google import genai
from google.genai import types

from .insights import growth_stage
from .plant_state import Mood

logger = logging.getLogger(__name__)

LOCAL_LLM_URL = os.getenv("PLANT_LOCAL_LLM_URL", "http://localhost:1234/v1/chat/completions")
LOCAL_LLM_MODEL = os.getenv("PLANT_LOCAL_LLM_MODEL", "gpt-oss-20b")
GEMINI_MODEL = os.getenv("PLANT_GEMINI_MODEL", "gemini-1.5-flash")
DEFAULT_TIMEOUT = 30.0  # seconds

MOOD_CONTEXT = {
    Mood.SAD: "feeling down and needs comfort and encouragement",
    Mood.NEUTRAL: "in a balanced state and appreciates gentle guidance",
    Mood.HAPPY: "feeling great and ready for positive energy",
}


class ReplyBackendError(Exception):
    """Raised when a backend cannot produce a reply."""


def build_system_prompt(mood: Mood, growth: int, streak: int, plant_name: str) -> str:
    """Short persona prompt used as the system message for chat completions."""
    return (
        f"You are {plant_name}, a gentle, caring plant companion. "
        f"You respond based on the user's mood and your growth. "
        f"Current mood: {Mood.parse(mood).value}, Growth: {growth}%, Streak: {streak} days. "
        "Be encouraging, empathetic, and plant-themed in your responses. "
        "Keep responses short and sweet, like a caring friend."
    )


def build_companion_prompt(
    user_text: str, mood: Mood, growth: int, streak: int, plant_name: str
) -> str:
    """Single-turn prompt for backends without a system role."""
    return f"""You are {plant_name}, a wise and caring plant companion who has been growing alongside your human friend. You have a warm, nurturing personality and speak with gentle wisdom.

Your current state:
- Growth level: {growth}/100 ({growth_stage(growth)})
- Your friend is {MOOD_CONTEXT[Mood.parse(mood)]}
- Daily streak: {streak} days

Your friend just said: "{user_text}"

Respond as {plant_name} with empathy for their current mood, plant-inspired wisdom and metaphors, and encouragement about growth and resilience. Keep it warm, concise (2-3 sentences) and authentic. Be supportive but not overly cheerful if they're sad."""


class ReplyBackend:
    """Interface for text generation backends."""

    name = "base"

    async def generate_reply(
        self, user_text: str, mood: Mood, growth: int, streak: int, plant_name: str
    ) -> str:
        """
        Generate the plant's reply to a user message.

        Raises:
            ReplyBackendError: on any failure
        """
        raise NotImplementedError

    async def generate_text(self, prompt: str) -> str:
        """
        Generate free text for a standalone prompt.

        Raises:
            ReplyBackendError: on any failure
        """
        raise NotImplementedError


class LocalCompletionBackend(ReplyBackend):
    """OpenAI-compatible chat completions endpoint (LM Studio, llama.cpp server)."""

    name = "local"

    def __init__(
        self,
        url: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: int = 150,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the backend.

        Args:
            url: Chat completions URL (default from PLANT_LOCAL_LLM_URL)
            model: Model name sent with each request
            temperature: Sampling temperature
            max_tokens: Maximum tokens in a reply
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.url = url or LOCAL_LLM_URL
        self.model = model or LOCAL_LLM_MODEL
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.transport = transport

    async def generate_reply(
        self, user_text: str, mood: Mood, growth: int, streak: int, plant_name: str
    ) -> str:
        return await self._complete([
            {"role": "system", "content": build_system_prompt(mood, growth, streak, plant_name)},
            {"role": "user", "content": user_text},
        ])

    async def generate_text(self, prompt: str) -> str:
        return await self._complete([{"role": "user", "content": prompt}])

    async def _complete(self, messages: List[Dict[str, str]]) -> str:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout), transport=self.transport
            ) as client:
                response = await client.post(self.url, json=payload)
        except httpx.TimeoutException as e:
            raise ReplyBackendError(f"Local model timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise ReplyBackendError(f"Cannot reach local model at {self.url}: {e}") from e

        if response.status_code != 200:
            raise ReplyBackendError(
                f"Local model returned status {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise ReplyBackendError(f"Malformed completion response: {e}") from e

        if not isinstance(content, str) or not content.strip():
            raise ReplyBackendError("Local model returned an empty reply")
        return content.strip()


class GeminiBackend(ReplyBackend):
    """Hosted Gemini API through the google-genai SDK."""

    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 250,
        client: Optional[Any] = None,
    ):
        """
        Initialize the backend.

        Args:
            api_key: Gemini API key (default from GEMINI_API_KEY)
            model: Gemini model name
            temperature: Sampling temperature
            max_output_tokens: Maximum tokens in a reply
            client: Preconfigured genai.Client (used by tests)
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY", "")
        self.model = model or GEMINI_MODEL
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self._client = client

        if not self.configured:
            logger.warning("[BACKEND] GEMINI_API_KEY not set - running in demo mode, replies will use fallbacks")

    @property
    def configured(self) -> bool:
        return bool(self.api_key) or self._client is not None

    def _get_client(self):
        if self._client is None:
            if not self.api_key:
                raise ReplyBackendError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_reply(
        self, user_text: str, mood: Mood, growth: int, streak: int, plant_name: str
    ) -> str:
        return await self.generate_text(
            build_companion_prompt(user_text, mood, growth, streak, plant_name)
        )

    async def generate_text(self, prompt: str) -> str:
        client = self._get_client()
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except Exception as e:
            raise ReplyBackendError(f"Gemini request failed: {e}") from e

        text = getattr(response, "text", None)
        if not text or not text.strip():
            raise ReplyBackendError("Gemini returned an empty reply")
        return text.strip()


def create_backend(name: str, **kwargs) -> ReplyBackend:
    """
    Build a backend by name.

    Args:
        name: "local" or "gemini"
        **kwargs: Passed to the backend constructor

    Raises:
        ValueError: for an unknown backend name
    """
    backends = {
        LocalCompletionBackend.name: LocalCompletionBackend,
        GeminiBackend.name: GeminiBackend,
    }
    if name not in backends:
        raise ValueError(f"Unknown reply backend '{name}'. Must be one of: {list(backends)}")
    logger.info(f"[BACKEND] Using {name} reply backend")
    return backends[name](**kwargs)
