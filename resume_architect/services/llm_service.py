"""Service for LLM integration with Ollama."""

import logging
import os
from typing import Optional, Dict, Any
import httpx
from pydantic_settings import BaseSettings
from resume_architect.errors import GenerationError

logger = logging.getLogger(__name__)


class OllamaSettings(BaseSettings):
    """Ollama configuration settings."""

    ollama_base_url: str = os.getenv("OLLAMA_BASE_URL", "http://localhost:11434")
    ollama_model: str = os.getenv("OLLAMA_MODEL", "llama3:8b")
    ollama_timeout: int = int(os.getenv("OLLAMA_TIMEOUT", "60"))
    ollama_api_key: Optional[str] = os.getenv("OLLAMA_API_KEY", None)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


class LLMService:
    """Service for interacting with Ollama LLM."""

    def __init__(
        self,
        settings: Optional[OllamaSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize LLM service.

        Args:
            settings: Ollama settings (uses defaults if None)
            transport: HTTP transport override (used by tests)
        """
        self.settings = settings or OllamaSettings()
        self.base_url = self.settings.ollama_base_url.rstrip("/")
        self.model = self.settings.ollama_model
        self.timeout = self.settings.ollama_timeout
        self.api_key = self.settings.ollama_api_key
        self.transport = transport

    async def generate(
        self,
        prompt: str,
        system: Optional[str] = None,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        response_format: Optional[Dict[str, Any]] = None
    ) -> str:
        """
        Generate text using Ollama.

        Args:
            prompt: User prompt
            system: System prompt (optional)
            temperature: Temperature for generation (0.0-1.0)
            max_tokens: Maximum tokens to generate (optional)
            response_format: JSON schema the output must conform to (optional)

        Returns:
            str: Generated text

        Raises:
            GenerationError: If the request fails or the response is unusable
        """
        url = f"{self.base_url}/api/generate"

        payload: Dict[str, Any] = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
            "options": {
                "temperature": temperature,
            }
        }

        if system:
            payload["system"] = system

        if max_tokens:
            payload["options"]["num_predict"] = max_tokens

        if response_format is not None:
            payload["format"] = response_format

        headers = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        logger.debug(
            "Sending %s request to %s (%d prompt chars)",
            "structured" if response_format is not None else "freeform",
            self.model,
            len(prompt),
        )

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                result = response.json()
            except httpx.TimeoutException as e:
                raise GenerationError(f"Ollama request timed out after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise GenerationError(
                    f"Ollama rejected the request with status {e.response.status_code}"
                ) from e
            except httpx.HTTPError as e:
                raise GenerationError(f"Failed to communicate with Ollama: {str(e)}") from e
            except ValueError as e:
                raise GenerationError("Ollama returned a non-JSON body") from e

        if not isinstance(result, dict) or not isinstance(result.get("response"), str):
            raise GenerationError(f"Unexpected response format: {result}")
        return result["response"]
