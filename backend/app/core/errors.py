"""
에러 분류

- 사용자에게 보이는 에러: ValidationError(400), InternalError(500)
  -> main.py의 exception handler가 {"error": message} 로 변환
- 내부에서만 복구되는 에러: ProviderError, ParseError
  -> generator.py 안에서 잡아서 다음 provider / fallback / 빈 리스트로 처리
"""

from __future__ import annotations

from typing import Optional


class AppError(Exception):
    status_code = 500
    message = "Failed to generate ideas"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    message = "Niche is required"


class InternalError(AppError):
    status_code = 500
    message = "Failed to generate ideas"


class ProviderError(Exception):
    """네트워크 실패 / 2xx 아님 / 응답 봉투 구조가 이상함"""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider}: {reason}")


class ParseError(ValueError):
    """provider는 성공했지만 답변에서 아이디어 배열을 못 꺼냄"""
