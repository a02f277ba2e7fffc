"""Parse Gemini's free-text analysis into risk level, summary and details."""

from typing import List, Optional

from .models import ParsedAnalysis, RiskLevel

RISK_MARKER = "Risk Level:"
SUMMARY_MARKER = "Summary:"
DETAILS_MARKER = "Detailed Analysis:"
DETAIL_PREFIX = "- "

SUMMARY_PLACEHOLDER = "Analysis could not be parsed correctly."
FALLBACK_SUMMARY = (
    "The AI returned a response, but it could not be structured into a clear analysis. "
    "Please review the raw text below."
)

_RISK_VALUES = {level.value for level in RiskLevel}


def _trim(line: str) -> str:
    return line.strip().strip("\ufeff").strip()


def _find_index(lines: List[str], marker: str) -> int:
    for i, line in enumerate(lines):
        if line.startswith(marker):
            return i
    return -1


def _parse_risk(lines: List[str]) -> RiskLevel:
    idx = _find_index(lines, RISK_MARKER)
    if idx == -1:
        return RiskLevel.UNKNOWN
    value = lines[idx].replace(RISK_MARKER, "", 1).strip().upper()
    if value in _RISK_VALUES:
        return RiskLevel(value)
    return RiskLevel.UNKNOWN


def parse_analysis_text(raw_text: Optional[str]) -> ParsedAnalysis:
    """
    Parse the model reply. Never raises.

    Expected shape:
        Risk Level: HIGH
        Summary: ...
        Detailed Analysis:
        - point
        - point

    When neither a valid risk level nor any detail bullet is found, the
    reply is returned verbatim as details under a fixed fallback summary.
    """
    text = raw_text or ""
    lines = [_trim(line) for line in text.splitlines()]
    lines = [line for line in lines if line]

    risk_level = _parse_risk(lines)
    summary = SUMMARY_PLACEHOLDER
    details: List[str] = []

    summary_idx = _find_index(lines, SUMMARY_MARKER)
    details_idx = _find_index(lines, DETAILS_MARKER)

    if summary_idx != -1:
        end = details_idx if details_idx > summary_idx else len(lines)
        joined = " ".join(lines[summary_idx:end])
        summary = joined.replace(SUMMARY_MARKER, "", 1).strip()

    if details_idx != -1:
        for line in lines[details_idx + 1:]:
            if line.startswith(DETAIL_PREFIX):
                details.append(line[len(DETAIL_PREFIX):].strip())

    if risk_level is RiskLevel.UNKNOWN and not details:
        return ParsedAnalysis(
            risk_level=RiskLevel.UNKNOWN,
            summary=FALLBACK_SUMMARY,
            details=[line for line in text.splitlines() if _trim(line)],
        )

    return ParsedAnalysis(risk_level=risk_level, summary=summary, details=details)
