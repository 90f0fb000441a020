"""
Pydantic 스키마

- 프론트(Streamlit) <-> 백엔드 사이 계약(Contract)
- 필드명은 프론트가 그대로 쓰는 camelCase(viralityScore) 유지
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class VideoIdea(BaseModel):
    title: str = Field(..., description="영상 제목")
    hook: str = Field(..., description="첫 3초 훅")
    script: str = Field(..., description="타임스탬프 포함 대본")
    hashtags: List[str] = Field(..., description="해시태그(순서 유지, # 없이)")
    viralityScore: int = Field(..., description="바이럴 점수(보통 70~95, 강제하지 않음)")
    reasoning: str = Field(..., description="왜 터질지 설명")


class GenerateRequest(BaseModel):
    # niche가 없을 때 422가 아니라 400("Niche is required")을 주려고 Optional
    niche: Optional[str] = Field(default=None, description="니치/주제 (필수)")
    trend: Optional[str] = Field(default=None, description="현재 트렌드 (선택)")


class GenerateResponse(BaseModel):
    ideas: List[VideoIdea] = Field(default_factory=list, description="생성된 아이디어 (비어 있을 수 있음)")


class ErrorResponse(BaseModel):
    error: str
