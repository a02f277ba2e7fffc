import pytest

from verity.models import ContentType, RiskLevel
from verity.prompts import build_chat_seed, build_prompt


def test_url_prompt():
    prompt = build_prompt("https://example.com/story", ContentType.URL)
    assert '"https://example.com/story"' in prompt
    assert "Risk Level: [Choose one: LOW, MEDIUM, HIGH, UNKNOWN]" in prompt
    assert "Summary:" in prompt
    assert "Detailed Analysis:" in prompt
    assert "Google Search" in prompt
    assert "phishing" in prompt
    assert "without any introductory or concluding remarks" in prompt
    assert prompt.count("\n- [") == 4


def test_text_prompt_offers_no_unknown():
    prompt = build_prompt("The moon is made of cheese.", "text")
    assert '"The moon is made of cheese."' in prompt
    assert "Risk Level: [Choose one: LOW, MEDIUM, HIGH]" in prompt
    assert "UNKNOWN" not in prompt
    assert "emotionally charged language" in prompt
    assert "without any introductory or concluding remarks" in prompt
    assert prompt.count("\n- [") == 3


def test_unsupported_type_raises():
    with pytest.raises(ValueError):
        build_prompt("x", "image")


def test_chat_seed(sample_result):
    user_text, model_text = build_chat_seed(sample_result)
    assert user_text == "Here is the text I analyzed:\n\nDrinking bleach cures flu."
    assert "Risk Level: HIGH\n" in model_text
    assert "Summary: This claim is false.\n" in model_text
    assert "Details: \n- No citation provided\n- Contradicts WHO data" in model_text
    assert model_text.endswith("I am ready to answer your follow-up questions.")
    assert sample_result.risk_level is RiskLevel.HIGH
