import asyncio
import time
from datetime import datetime
from typing import List
from zoneinfo import ZoneInfo

from core.config import settings
from core.logging_config import get_logger
from schemas.interview import AnalysisMetadata, InterviewAnalysisReq, InterviewAnalysisRes
from services.fallback import default_learning_path, default_questions, sample_learning_path, sample_questions
from services.gemini_gateway import GatewayError, GeminiGateway
from services.profile_text import full_profile_text
from services.prompt_builder import build_learning_path_prompt, build_question_prompt
from services.response_parser import format_as_markup, parse_questions
from services.scoring import extracted_keywords, priority, quality_score

KST = ZoneInfo("Asia/Seoul")

logger = get_logger(__name__)


async def _generate_questions(gateway: GeminiGateway, profile_text: str) -> List[str]:
    try:
        raw = await gateway.complete(build_question_prompt(profile_text))
    except GatewayError as e:
        logger.warning("면접 질문 생성 실패, 기본 질문 사용: %s", e)
        return default_questions()

    questions = parse_questions(raw)
    if not questions:
        # 번호 형식이 어긋난 응답은 호출 실패와 같이 취급
        logger.warning("AI 응답에서 질문을 찾지 못해 기본 질문 사용")
        return default_questions()
    return questions


async def _generate_learning_path(gateway: GeminiGateway, profile_text: str) -> str:
    try:
        raw = await gateway.complete(build_learning_path_prompt(profile_text))
    except GatewayError as e:
        logger.warning("학습 경로 생성 실패, 기본 경로 사용: %s", e)
        return default_learning_path()
    return format_as_markup(raw)


async def analyze_profile(req: InterviewAnalysisReq, gateway: GeminiGateway) -> InterviewAnalysisRes:
    started = time.perf_counter()
    try:
        profile_text = full_profile_text(req)
        # 한쪽이 실패해도 나머지 호출이 끝날 때까지 기다린 뒤 결과를 조립한다
        results = await asyncio.gather(
            _generate_questions(gateway, profile_text),
            _generate_learning_path(gateway, profile_text),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        questions, learning_path = results
        logger.info("면접 질문 %d개, 학습 경로 %d자 생성", len(questions), len(learning_path))

        metadata = AnalysisMetadata(
            processingTimeMs=int((time.perf_counter() - started) * 1000),
            aiModel=settings.llm_model_label,
            qualityScore=quality_score(req),
            analysisTimestamp=datetime.now(KST).replace(tzinfo=None).isoformat(timespec="seconds"),
            priority=priority(req),
            extractedKeywords=extracted_keywords(req),
        )
        return InterviewAnalysisRes.ok(questions, learning_path, metadata)
    except Exception as e:
        logger.exception("프로필 분석 중 오류 발생")
        return InterviewAnalysisRes.fail(f"분석 처리 중 오류가 발생했습니다: {e}")


def generate_sample_questions(position: str, experience: str) -> InterviewAnalysisRes:
    return InterviewAnalysisRes.ok(sample_questions(position, experience), sample_learning_path())
