import time

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes.interview import router as interview_router
from core.config import settings
from core.logging_config import get_logger, setup_logging

setup_logging(settings.log_level)
logger = get_logger("http")

app = FastAPI(title="Interview Analyzer", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,
    max_age=3600,
)

app.include_router(interview_router, tags=["interview"])


@app.middleware("http")
async def log_interview_requests(request: Request, call_next):
    if not request.url.path.startswith("/api/interview"):
        return await call_next(request)

    started = time.perf_counter()
    response = await call_next(request)
    logger.debug(
        "%s %s -> %s (%.1fms, content-type=%s)",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - started) * 1000,
        request.headers.get("content-type"),
    )
    return response


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if not request.url.path.startswith("/api/"):
        return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(p) for p in first.get("loc", ()))
    message = f"잘못된 요청입니다: {location} {first.get('msg', '')}".strip()
    return JSONResponse(status_code=400, content={"success": False, "errorMessage": message})


@app.get("/health")
def health():
    return {"ok": True}
