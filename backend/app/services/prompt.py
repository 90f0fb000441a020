"""
프롬프트 템플릿

provider A/B 모두 같은 프롬프트를 받는다.
parsing.py가 JSON 배열을 꺼내야 하므로 아래 두 가지는 바꾸면 안 됨:
- 6개 키: title, hook, script, hashtags, viralityScore, reasoning
- "JSON array로 출력" 지시
"""

from __future__ import annotations

from typing import Optional


def build_prompt(niche: str, trend: Optional[str] = None) -> str:
    trend_part = f' with the current trend: "{trend}"' if trend else ""

    return f"""You are a viral YouTube Shorts expert. Generate 3 highly viral video ideas for the niche: "{niche}"{trend_part}.

For each idea, provide:
1. A catchy, clickbait-worthy title (under 60 characters)
2. A powerful hook for the first 3 seconds that stops scrolling
3. A complete 30-45 second script with pacing notes
4. 5-7 relevant hashtags
5. A virality score (70-95%)
6. Reasoning explaining why this will go viral

Format your response as JSON array:
[
  {{
    "title": "...",
    "hook": "...",
    "script": "...",
    "hashtags": ["tag1", "tag2", ...],
    "viralityScore": 85,
    "reasoning": "..."
  }}
]

Make the ideas:
- Attention-grabbing from the first second
- Easy to produce (no complex equipment needed)
- Emotionally engaging or surprising
- Shareable and relatable
- Optimized for the vertical 9:16 format
- Under 60 seconds total duration"""
