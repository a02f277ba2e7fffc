"""Analysis orchestration: prompt -> Gemini with Google Search -> parsed result."""

import logging
from typing import Any, Optional, Union

from google.genai.types import GenerateContentConfig, GoogleSearch, Tool

from .config import DEFAULT_MODEL
from .errors import AnalysisFailure
from .gemini_client import get_client
from .models import AnalysisResult, ContentType
from .parser import parse_analysis_text
from .prompts import ANALYSIS_SYSTEM_INSTRUCTION, build_prompt
from .sources import extract_grounding_sources

logger = logging.getLogger(__name__)


def analyze_content(
    content: str,
    content_type: Union[ContentType, str],
    client: Optional[Any] = None,
    model: Optional[str] = None,
) -> AnalysisResult:
    """
    Analyze text or a URL for misinformation.

    One generate_content call with the Google Search tool enabled, no retry
    and no caching. Any failure talking to the service is logged and raised
    as AnalysisFailure; malformed replies are never an error (see
    parse_analysis_text).
    """
    kind = ContentType(content_type)
    client = client or get_client()
    model = model or DEFAULT_MODEL
    logger.info("Analyzing %s (%d chars) with %s", kind.value, len(content), model)

    try:
        response = client.models.generate_content(
            model=model,
            contents=build_prompt(content, kind),
            config=GenerateContentConfig(
                system_instruction=ANALYSIS_SYSTEM_INSTRUCTION,
                tools=[Tool(google_search=GoogleSearch())],
            ),
        )
        raw_text = response.text or ""
        sources = extract_grounding_sources(response)
    except Exception as exc:
        logger.exception("Error calling Gemini API for %s analysis", kind.value)
        raise AnalysisFailure("Failed to get analysis from the AI model.") from exc

    parsed = parse_analysis_text(raw_text)
    logger.info(
        "Analysis complete: risk=%s details=%d sources=%d",
        parsed.risk_level.value, len(parsed.details), len(sources),
    )
    return AnalysisResult(
        risk_level=parsed.risk_level,
        summary=parsed.summary,
        details=parsed.details,
        sources=sources,
        original_content=content,
        original_type=kind,
    )
