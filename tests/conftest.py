import asyncio
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("GEMINI_API_KEY", "test-key")

from services.gemini_gateway import GatewayError, GeminiGateway  # noqa: E402

QUESTIONS_TEXT = (
    "1. Spring에서 트랜잭션 전파 속성을 설명해주세요.\n\n"
    "2. JPA N+1 문제를 해결한 경험이 있나요?\n\n"
    "3. REST API 설계 시 고려하는 점은 무엇인가요?\n\n"
    "4. 팀 프로젝트에서 갈등을 해결한 경험을 STAR 방식으로 설명해주세요.\n\n"
    "5. 대용량 트래픽 처리를 위한 캐시 전략을 설명해주세요."
)

LEARNING_PATH_TEXT = (
    "## 단기 목표 (1-3개월)\n"
    "- Java 기초 복습\n"
    "- Spring Boot 튜토리얼\n\n"
    "## 중기 목표 (3-6개월)\n"
    "- JPA 심화\n\n"
    "## 장기 목표 (6개월 이상)\n"
    "- MSA 설계\n\n"
    "## 추천 리소스\n"
    "- 김영한 스프링 강의\n"
)

Reply = Union[str, Exception]


class FakeGateway(GeminiGateway):
    """프롬프트 종류에 따라 미리 정한 응답을 돌려주는 게이트웨이."""

    def __init__(
            self,
            questions: Reply = QUESTIONS_TEXT,
            learning_path: Reply = LEARNING_PATH_TEXT,
            delays: Optional[Dict[str, float]] = None,
    ):
        super().__init__(api_key="test-key", api_url="http://gemini.test/generate")
        self.replies: Dict[str, Reply] = {"questions": questions, "learning_path": learning_path}
        self.delays: Dict[str, float] = delays or {}
        self.prompts: List[str] = []
        self.finished: List[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        kind = "questions" if "면접관" in prompt else "learning_path"
        if self.delays.get(kind):
            await asyncio.sleep(self.delays[kind])
        self.finished.append(kind)
        reply = self.replies[kind]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def fake_gateway_factory() -> Callable[..., FakeGateway]:
    return FakeGateway


@pytest.fixture
def failing_gateway() -> FakeGateway:
    return FakeGateway(
        questions=GatewayError("connection refused"),
        learning_path=GatewayError("connection refused"),
    )


@pytest.fixture
def client_with():
    from fastapi.testclient import TestClient

    from main import app
    from services.gemini_gateway import get_gateway

    def _make(gateway: GeminiGateway) -> TestClient:
        app.dependency_overrides[get_gateway] = lambda: gateway
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()
