from __future__ import annotations

import asyncio
from typing import Optional

import httpx
from pydantic import ValidationError

from core.config import settings
from core.logging_config import get_logger
from schemas.gemini import GeminiRequest, GeminiResponse

logger = get_logger(__name__)

MODEL_INFO = "Google Gemini 2.5 Flash Latest - 면접 질문 생성 및 학습 경로 추천에 최적화된 모델"


class GatewayError(RuntimeError):
    """Gemini 호출 실패 (네트워크, HTTP 상태, 응답 형식)."""


class GeminiGateway:
    def __init__(
            self,
            api_key: str,
            api_url: str,
            timeout: float = 30.0,
            max_response_bytes: int = 10 * 1024 * 1024,
            transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.api_url = api_url
        self.timeout = timeout
        self.max_response_bytes = max_response_bytes
        self._transport = transport

    @classmethod
    def from_settings(cls, transport: Optional[httpx.AsyncBaseTransport] = None) -> "GeminiGateway":
        return cls(
            api_key=settings.gemini_api_key,
            api_url=settings.gemini_api_url,
            timeout=settings.gemini_timeout_seconds,
            max_response_bytes=settings.gemini_max_response_bytes,
            transport=transport,
        )

    def model_info(self) -> str:
        return MODEL_INFO

    async def complete(self, prompt: str) -> str:
        """프롬프트를 보내고 첫 번째 후보의 첫 텍스트를 반환한다. 재시도는 하지 않는다."""
        payload = GeminiRequest.from_prompt(prompt).model_dump(exclude_none=True)

        try:
            # httpx timeout은 단계별로 걸리므로 호출 전체에도 상한을 둔다
            body = await asyncio.wait_for(self._post(payload), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("Gemini API 호출 시간 초과: %.1fs", self.timeout)
            raise GatewayError(f"Gemini API 호출이 {self.timeout}초 안에 끝나지 않았습니다") from e
        except httpx.HTTPStatusError as e:
            logger.error("Gemini API 오류 응답: status=%s", e.response.status_code)
            raise GatewayError(f"Gemini API가 {e.response.status_code} 상태를 반환했습니다") from e
        except httpx.HTTPError as e:
            logger.error("Gemini API 호출 실패: %s", e.__class__.__name__)
            raise GatewayError(f"Gemini API 호출 실패: {e}") from e

        try:
            data = GeminiResponse.model_validate_json(body)
        except ValidationError as e:
            logger.error("Gemini API 응답 파싱 오류")
            raise GatewayError("AI 응답 처리 중 오류가 발생했습니다") from e

        text = data.first_text()
        if text is None:
            raise GatewayError("AI 응답에 candidates[0].content.parts[0].text 가 없습니다")
        return text

    async def _post(self, payload: dict) -> bytes:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            async with client.stream(
                    "POST",
                    self.api_url,
                    params={"key": self.api_key},
                    json=payload,
            ) as resp:
                resp.raise_for_status()
                return await self._read_limited(resp)

    async def _read_limited(self, resp: httpx.Response) -> bytes:
        declared = resp.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_response_bytes:
            raise GatewayError(f"AI 응답이 너무 큽니다 ({declared} bytes)")

        chunks = bytearray()
        async for chunk in resp.aiter_bytes():
            chunks.extend(chunk)
            if len(chunks) > self.max_response_bytes:
                raise GatewayError(f"AI 응답이 {self.max_response_bytes} bytes 를 초과했습니다")
        return bytes(chunks)


_gateway: Optional[GeminiGateway] = None


def get_gateway() -> GeminiGateway:
    global _gateway
    if _gateway is None:
        _gateway = GeminiGateway.from_settings()
    return _gateway
