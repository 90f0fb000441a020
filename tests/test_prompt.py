from backend.app.services.prompt import build_prompt


def test_prompt_asks_for_json_array_with_all_keys():
    prompt = build_prompt("Cooking")

    assert 'niche: "Cooking"' in prompt
    assert "JSON array" in prompt
    for key in ("title", "hook", "script", "hashtags", "viralityScore", "reasoning"):
        assert f'"{key}"' in prompt
    assert "current trend" not in prompt


def test_prompt_mentions_trend():
    assert 'with the current trend: "AI Tools"' in build_prompt("Fitness", "AI Tools")
