"""
FastAPI 엔트리포인트

- /api/generate : 숏폼 아이디어 생성
- /health       : 헬스체크

에러 응답은 전부 {"error": "..."} 한 가지 모양으로 맞춘다.
(FastAPI 기본값인 {"detail": ...} / 422 대신)
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.app.api.routes import router as api_router
from backend.app.core.config import settings
from backend.app.core.errors import AppError, InternalError
from backend.app.core.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(title="Viral Shorts Agent", version="0.1.0")

# CORS: Streamlit(8501)에서 FastAPI(8000) 호출할 거라 열어둠
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # 깨진 JSON / niche가 문자열이 아님 등
    logger.error("Error generating ideas: malformed request body. errors=%s", exc.errors())
    err = InternalError()
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    err = InternalError()
    return JSONResponse(status_code=err.status_code, content={"error": err.message})


@app.get("/health")
def health():
    return {"ok": True}
