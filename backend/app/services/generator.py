"""
아이디어 생성기

흐름:
1) niche 검증 (없거나 공백뿐이면 ValidationError)
2) 키가 있는 provider를 우선순위대로 1번씩 호출 (A 실패 -> B)
3) 첫 번째로 답변 텍스트를 준 provider의 결과를 파싱해서 반환
   - 파싱 실패면 빈 리스트 (fallback 아님!)
4) 답변을 준 provider가 없으면 로컬 fallback 3개

설정(Settings)은 생성자로 주입받는다. 테스트에서 키 있음/없음 상태를
환경변수 건드리지 않고 바꿀 수 있게.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from backend.app.core.config import Settings, settings
from backend.app.core.errors import ProviderError, ValidationError
from backend.app.core.logger import get_logger
from backend.app.schemas import VideoIdea
from backend.app.services.fallback import generate_fallback_ideas
from backend.app.services.parsing import parse_reply
from backend.app.services.prompt import build_prompt
from backend.app.services.providers import Provider, configured_providers

logger = get_logger(__name__)


def _blank(s: Optional[str]) -> bool:
    return s is None or not str(s).strip()


class IdeaGenerator:
    def __init__(self, cfg: Settings, providers: Optional[Sequence[Provider]] = None):
        self.cfg = cfg
        self.providers = list(providers) if providers is not None else configured_providers(cfg)

    def generate(self, niche: Optional[str], trend: Optional[str] = None) -> List[VideoIdea]:
        # 공백 검사만 strip 기준, 템플릿/프롬프트에는 입력 그대로
        if _blank(niche):
            raise ValidationError()
        if _blank(trend):
            trend = None

        if not self.providers:
            logger.info("No provider API key configured, using fallback ideas. niche=%s", niche)
            return generate_fallback_ideas(niche, trend)

        prompt = build_prompt(niche, trend)
        for provider in self.providers:
            try:
                reply = provider.complete(prompt)
            except ProviderError as e:
                logger.warning("Provider call failed, trying next. provider=%s err=%s", provider.name, e.reason)
                continue

            ideas = parse_reply(reply)
            logger.info("provider=%s returned %d idea(s)", provider.name, len(ideas))
            return ideas

        logger.warning("All providers failed, using fallback ideas. niche=%s", niche)
        return generate_fallback_ideas(niche, trend)


def get_generator() -> IdeaGenerator:
    """FastAPI dependency (테스트에서는 app.dependency_overrides로 교체)"""
    return IdeaGenerator(settings)
