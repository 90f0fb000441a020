"""
API 라우터

- 프론트(Streamlit)가 보내는 JSON {niche, trend}를 받음
- IdeaGenerator로 아이디어 생성 (provider -> fallback)
- {ideas: [...]} 반환

def 엔드포인트라서 FastAPI threadpool에서 돈다 (requests 블로킹 호출 OK).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from backend.app.core.errors import AppError, InternalError
from backend.app.core.logger import get_logger
from backend.app.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from backend.app.services.generator import IdeaGenerator, get_generator

logger = get_logger(__name__)
router = APIRouter(prefix="/api", tags=["generator"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate(
    body: GenerateRequest,
    generator: IdeaGenerator = Depends(get_generator),
):
    try:
        ideas = generator.generate(body.niche, body.trend)
    except AppError:
        raise
    except Exception as e:
        logger.exception("Error generating ideas")
        raise InternalError() from e

    return GenerateResponse(ideas=ideas)
