"""Prompt templates and system instructions sent to Gemini."""

from typing import Tuple, Union

from .models import AnalysisResult, ContentType

ANALYSIS_SYSTEM_INSTRUCTION = (
    "You are a secured research assistant. Your goal is to provide a neutral, fact-based "
    "analysis of content to identify potential misinformation without making definitive "
    "judgments. Your tone should be formal, objective, and helpful."
)

CHAT_SYSTEM_INSTRUCTION = (
    "You are a secured research assistant. The user has just received an analysis of a "
    "piece of content. Your role is to answer their follow-up questions about this analysis "
    "or the topic in a neutral, fact-based manner. Do not make definitive judgments. "
    "Be helpful and objective."
)


def _url_prompt(url: str) -> str:
    return (
        "Analyze the content at the following URL for credibility, safety, and potential "
        "misinformation. Assess if the source is trustworthy, authorized, and safe for users. "
        "Use the Google Search tool to investigate the website's reputation, domain age, "
        "author credibility, and to fact-check the main claims in the content. Provide your "
        "analysis in the exact format below, without any introductory or concluding remarks.\n\n"
        "Risk Level: [Choose one: LOW, MEDIUM, HIGH, UNKNOWN]\n"
        "Summary: [A brief, one-paragraph summary of your findings. Address the content's "
        "accuracy, the source's credibility, and any potential safety concerns like phishing "
        "or excessive ads.]\n"
        "Detailed Analysis:\n"
        "- [First specific point of analysis, e.g., \"Website Reputation: The domain is "
        "well-known and generally considered reliable/unreliable...\"]\n"
        "- [Second specific point, e.g., \"Author Credibility: The author is/is not a "
        "recognized expert in this field...\"]\n"
        "- [Third specific point, e.g., \"Fact-Check: The central claim in the article is "
        "supported/contradicted by information from these reputable sources...\"]\n"
        "- [Fourth specific point, e.g., \"User Experience & Safety: The site does/does not "
        "contain intrusive pop-ups, malware warnings, or signs of a phishing attempt...\"]\n\n"
        "The URL to analyze is:\n"
        f"\"{url}\"\n"
    )


def _text_prompt(text: str) -> str:
    return (
        "Analyze the following text for potential misinformation. Use the Google Search tool "
        "to find grounding information. Provide your analysis in the exact format below, "
        "without any introductory or concluding remarks.\n\n"
        "Risk Level: [Choose one: LOW, MEDIUM, HIGH]\n"
        "Summary: [A brief, one-paragraph summary of your findings and the main reason for "
        "your risk assessment.]\n"
        "Detailed Analysis:\n"
        "- [First specific point of analysis. Explain why it's a concern, e.g., \"Uses "
        "emotionally charged language...\"]\n"
        "- [Second specific point of analysis, e.g., \"Makes a factual claim without citing "
        "a credible source...\"]\n"
        "- [Third specific point of analysis, e.g., \"The claim contradicts information from "
        "reputable news organizations...\"]\n\n"
        "The text to analyze is:\n"
        f"\"{text}\"\n"
    )


def build_prompt(content: str, content_type: Union[ContentType, str]) -> str:
    """
    Build the analysis prompt for text or URL input.
    Raises ValueError for any other content type.
    """
    kind = ContentType(content_type)
    if kind is ContentType.URL:
        return _url_prompt(content)
    return _text_prompt(content)


def build_chat_seed(result: AnalysisResult) -> Tuple[str, str]:
    """
    The two synthetic turns that open a follow-up chat: the user handing
    over the content, and the model restating its assessment.
    """
    kind = ContentType(result.original_type).value
    user_text = f"Here is the {kind} I analyzed:\n\n{result.original_content}"
    details = "\n- ".join(result.details)
    model_text = (
        "Understood. I have analyzed the content and provided the following assessment:\n\n"
        f"Risk Level: {result.risk_level.value}\n"
        f"Summary: {result.summary}\n"
        f"Details: \n- {details}\n\n"
        "I am ready to answer your follow-up questions."
    )
    return user_text, model_text
