"""Data model shared by the analyzer, chat session and UI."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class RiskLevel(str, Enum):
    """Coarse verdict on how likely the content is to be misinformation."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"


class ContentType(str, Enum):
    """What the user submitted: pasted text or a URL."""

    TEXT = "text"
    URL = "url"


@dataclass(frozen=True)
class GroundingSource:
    """A web page the model cited while searching."""

    uri: str
    title: str


@dataclass
class ParsedAnalysis:
    """Structured fields recovered from the model's free-text reply."""

    risk_level: RiskLevel
    summary: str
    details: List[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    """Result of one analyze call, echoing the request that produced it."""

    risk_level: RiskLevel
    summary: str
    details: List[str]
    sources: List[GroundingSource]
    original_content: str
    original_type: ContentType


@dataclass
class ChatMessage:
    """One transcript entry. role is "user" or "model"."""

    role: str
    text: str
