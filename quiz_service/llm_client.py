# quiz_service/llm_client.py
import logging
from typing import Optional

import httpx

from quiz_service.config import Settings
from quiz_service.errors import ModelServiceError

logger = logging.getLogger(__name__)


class GeminiClient:
    """Sends a prompt to the Gemini ``generateContent`` endpoint and returns its text.

    No retries: every failure is raised as ``ModelServiceError`` for the caller.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = settings.gemini_api_key
        self.model_name = settings.gemini_model
        self.base_url = settings.gemini_base_url.rstrip("/")
        self.timeout = settings.request_timeout_seconds
        # tests pass an httpx.MockTransport here
        self._transport = transport

    @property
    def url(self) -> str:
        model = self.model_name
        if not model.startswith("models/"):
            model = f"models/{model}"
        return f"{self.base_url}/{model}:generateContent"

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise ModelServiceError("GEMINI_API_KEY is not configured")

        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {"x-goog-api-key": self.api_key}

        logger.info("Calling model %s", self.model_name)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, json=payload, headers=headers)
                resp.raise_for_status()
                body = resp.json()
        except httpx.HTTPStatusError as exc:
            logger.warning("Model service answered %s", exc.response.status_code, exc_info=True)
            raise ModelServiceError(f"Model service returned HTTP {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.warning("Model service request failed", exc_info=True)
            raise ModelServiceError(f"Model service request failed: {exc!r}") from exc
        except (ValueError, RecursionError) as exc:
            raise ModelServiceError("Model service returned a non-JSON body") from exc

        return self._extract_text(body)

    @staticmethod
    def _extract_text(body) -> str:
        if not isinstance(body, dict):
            raise ModelServiceError("Model service returned an unexpected body")

        candidates = body.get("candidates")
        if not candidates:
            raise ModelServiceError(f"Model service returned no candidates: {body.get('promptFeedback')}")
        if not isinstance(candidates, list) or not isinstance(candidates[0], dict):
            raise ModelServiceError("Model service returned malformed candidates")

        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            parts = []
        text = "".join(
            part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
        if not text:
            reason = candidates[0].get("finishReason")
            raise ModelServiceError(f"Model service returned an empty reply (finishReason={reason})")
        return text
