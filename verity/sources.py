"""Grounding citations: extract web sources from a Gemini response and dedupe them."""

from typing import Any, Iterable, List

from .models import GroundingSource

UNKNOWN_SOURCE_TITLE = "Unknown Source"


def _field(obj: Any, name: str) -> Any:
    """Read a field from an SDK object or a plain mapping."""
    if obj is None:
        return None
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


def dedupe_sources(sources: Iterable[GroundingSource]) -> List[GroundingSource]:
    """Keep the first source seen for each uri, in first-seen order."""
    seen = set()
    unique: List[GroundingSource] = []
    for source in sources:
        if source.uri in seen:
            continue
        seen.add(source.uri)
        unique.append(source)
    return unique


def sources_from_chunks(chunks: Iterable[Any]) -> List[GroundingSource]:
    """
    Map grounding chunks to GroundingSource, dropping entries without a
    web uri. Titles default to "Unknown Source".
    """
    sources: List[GroundingSource] = []
    for chunk in chunks or []:
        web = _field(chunk, "web")
        uri = _field(web, "uri") or ""
        title = _field(web, "title") or UNKNOWN_SOURCE_TITLE
        if uri:
            sources.append(GroundingSource(uri=uri, title=title))
    return dedupe_sources(sources)


def extract_grounding_sources(response: Any) -> List[GroundingSource]:
    """Sources from candidates[0].grounding_metadata.grounding_chunks, or []."""
    candidates = _field(response, "candidates") or []
    if not candidates:
        return []
    metadata = _field(candidates[0], "grounding_metadata")
    chunks = _field(metadata, "grounding_chunks") or []
    return sources_from_chunks(chunks)
