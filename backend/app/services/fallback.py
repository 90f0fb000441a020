"""
로컬 fallback 아이디어 (키가 없거나 provider가 전부 실패했을 때)

- 랜덤 없음: 같은 (niche, trend) -> 항상 같은 3개
- 점수는 고정 (87, 92, 89)
- 첫 해시태그 = niche 소문자 + 공백 제거
"""

from __future__ import annotations

import re
from typing import List, Optional

from backend.app.schemas import VideoIdea


def niche_slug(niche: str) -> str:
    return re.sub(r"\s+", "", niche.lower())


def _secret_idea(niche: str, trend: Optional[str]) -> VideoIdea:
    trend_text = f" + {trend}" if trend else ""
    return VideoIdea(
        title=f"The {niche} Secret Nobody Tells You{trend_text}",
        hook=f"Wait... this {niche} trick actually works?!",
        script=(
            f"[0-3s] Wait... this {niche} trick actually works?!\n\n"
            f"[3-10s] So I discovered something crazy about {niche} that professionals don't want you to know.\n\n"
            f"[10-25s] Here's what I found: {trend or 'the most effective technique'} completely changes the game. "
            "I tested this for 30 days and the results were insane.\n\n"
            "[25-35s] The key is doing THIS instead of what everyone else does. It's counterintuitive but it works.\n\n"
            "[35-40s] Try it and let me know what happens!\n\n"
            "[Visual: Fast cuts, dynamic text overlays, trending audio]"
        ),
        hashtags=[niche_slug(niche), "viral", "shorts", "fyp", "tutorial", "lifehack", "mindblown"],
        viralityScore=87,
        reasoning=(
            "This video leverages curiosity gaps, promises insider knowledge, and uses pattern interrupts. "
            'The "nobody tells you" angle creates FOMO. Fast pacing and visual variety keeps retention high. '
            f"The {niche} niche is searchable and the format is proven to drive engagement."
        ),
    )


def _thirty_days_idea(niche: str, trend: Optional[str]) -> VideoIdea:
    technique = f"involving {trend}" if trend else "that changed everything"
    return VideoIdea(
        title=f"I Tried {niche} For 30 Days... 🤯",
        hook=f"Day 1 vs Day 30 of {niche}... I can't believe this",
        script=(
            f"[0-3s] Day 1 vs Day 30 of {niche}... I can't believe this\n\n"
            "[3-8s] At first, I was terrible. Like really bad.\n\n"
            f"[8-15s] But then I learned THIS one technique {technique}.\n\n"
            "[15-28s] By day 15, I saw massive improvements. By day 30? I'm not even the same person. "
            "The transformation was wild.\n\n"
            "[28-38s] Here's exactly what I did: [Quick 3-step breakdown with text overlay]\n\n"
            '[38-45s] Comment "DAY 1" if you\'re starting today!\n\n'
            "[Visual: Split screen before/after, progress montage, upbeat music]"
        ),
        hashtags=[
            niche_slug(niche),
            "transformation",
            "30daychallenge",
            "beforeandafter",
            "progress",
            "motivated",
            "results",
        ],
        viralityScore=92,
        reasoning=(
            "Transformation content performs exceptionally well. The day 1 vs day 30 format creates immediate "
            "visual interest. Viewers stay to see the results. The CTA to comment increases engagement signals, "
            "boosting algorithmic reach. Progress stories are inherently shareable."
        ),
    )


def _wrong_way_idea(niche: str, trend: Optional[str]) -> VideoIdea:
    trend_text = f" especially with {trend}" if trend else ""
    return VideoIdea(
        title=f"Why Everyone Gets {niche} Wrong",
        hook=f"If you do {niche} like this, STOP immediately",
        script=(
            f"[0-3s] If you do {niche} like this, STOP immediately\n\n"
            "[3-9s] 99% of people make this mistake and wonder why they fail.\n\n"
            f"[9-18s] They do [common mistake] when they should be doing [correct method]{trend_text}.\n\n"
            "[18-30s] I wasted 2 years doing it wrong. Then I learned the right way and everything clicked. "
            "Now I'm gonna save you years of frustration.\n\n"
            "[30-40s] Here's the RIGHT way: [Clear demonstration or explanation]\n\n"
            "[40-45s] Share this with someone who needs to see it!\n\n"
            "[Visual: Red X over wrong method, green checkmark over right method, clear comparisons]"
        ),
        hashtags=[niche_slug(niche), "mistakes", "tutorial", "tips", "howto", "educational", "learn"],
        viralityScore=89,
        reasoning=(
            '"Everyone gets X wrong" creates instant curiosity and taps into loss aversion - people want to avoid '
            "making mistakes. The educational angle provides value while the confrontational tone stops scrollers. "
            "Clear visual comparisons enhance understanding and shareability."
        ),
    )


def generate_fallback_ideas(niche: str, trend: Optional[str] = None) -> List[VideoIdea]:
    trend = trend or None
    return [
        _secret_idea(niche, trend),
        _thirty_days_idea(niche, trend),
        _wrong_way_idea(niche, trend),
    ]
