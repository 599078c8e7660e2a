from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, PlainTextResponse

from core.logging_config import get_logger
from schemas.interview import InterviewAnalysisReq, InterviewAnalysisRes
from services.gemini_gateway import GeminiGateway, get_gateway
from services.interview_analyzer import analyze_profile, generate_sample_questions

logger = get_logger(__name__)

router = APIRouter(prefix="/api/interview")

HEALTH_MESSAGE = "면접 분석 서비스가 정상적으로 작동 중입니다."


def _json(res: InterviewAnalysisRes, status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=res.model_dump(exclude_none=True))


@router.post(
    "/analyze",
    response_model=InterviewAnalysisRes,
    response_model_exclude_none=True,
)
async def analyze_profile_route(
        req: InterviewAnalysisReq,
        gateway: GeminiGateway = Depends(get_gateway),
):
    logger.info("면접 분석 요청 수신: 직무=%s, 경력=%s", req.position, req.experience)
    try:
        res = await analyze_profile(req, gateway)
    except Exception as e:
        logger.exception("면접 분석 중 예외 발생")
        return _json(InterviewAnalysisRes.fail(f"서버 내부 오류가 발생했습니다: {e}"), 500)

    if not res.success:
        logger.error("면접 분석 실패: %s", res.errorMessage)
        return _json(res, 400)
    return _json(res)


@router.get("/health", response_class=PlainTextResponse)
def health_check():
    logger.debug("면접 서비스 상태 확인 요청")
    return HEALTH_MESSAGE


@router.get("/model-info", response_class=PlainTextResponse)
def model_info(gateway: GeminiGateway = Depends(get_gateway)):
    try:
        return gateway.model_info()
    except Exception as e:
        logger.exception("모델 정보 조회 실패")
        return PlainTextResponse(f"모델 정보 조회에 실패했습니다: {e}", status_code=500)


@router.get(
    "/sample-questions",
    response_model=InterviewAnalysisRes,
    response_model_exclude_none=True,
)
def sample_questions_route(
        position: str = Query(...),
        experience: str = Query("신입"),
):
    logger.info("샘플 면접 질문 요청: 직무=%s, 경력=%s", position, experience)
    try:
        return _json(generate_sample_questions(position, experience))
    except Exception as e:
        logger.exception("샘플 질문 생성 실패")
        return _json(InterviewAnalysisRes.fail(f"샘플 질문 생성에 실패했습니다: {e}"), 500)
