from types import SimpleNamespace

from verity.models import GroundingSource
from verity.sources import (
    UNKNOWN_SOURCE_TITLE,
    dedupe_sources,
    extract_grounding_sources,
    sources_from_chunks,
)

from conftest import make_response, web_chunk


def test_dedupe_first_occurrence_wins():
    sources = [
        GroundingSource("a", "A1"),
        GroundingSource("b", "B"),
        GroundingSource("a", "A2"),
    ]
    assert dedupe_sources(sources) == [GroundingSource("a", "A1"), GroundingSource("b", "B")]


def test_chunks_as_mappings():
    chunks = [
        {"web": {"uri": "a", "title": "A1"}},
        {"web": {"uri": "b", "title": "B"}},
        {"web": {"uri": "a", "title": "A2"}},
    ]
    assert sources_from_chunks(chunks) == [GroundingSource("a", "A1"), GroundingSource("b", "B")]


def test_missing_uri_dropped_and_missing_title_defaulted():
    chunks = [
        web_chunk("", "Empty"),
        SimpleNamespace(web=None),
        SimpleNamespace(),
        web_chunk("https://example.org"),
    ]
    assert sources_from_chunks(chunks) == [
        GroundingSource("https://example.org", UNKNOWN_SOURCE_TITLE)
    ]


def test_extract_from_response():
    response = make_response("x", [web_chunk("https://a.com", "A"), web_chunk("https://a.com", "A again")])
    assert extract_grounding_sources(response) == [GroundingSource("https://a.com", "A")]


def test_extract_tolerates_missing_metadata():
    assert extract_grounding_sources(SimpleNamespace(candidates=None)) == []
    assert extract_grounding_sources(SimpleNamespace(candidates=[])) == []
    assert extract_grounding_sources(make_response("x", None)) == []
    no_meta = SimpleNamespace(candidates=[SimpleNamespace(grounding_metadata=None)])
    assert extract_grounding_sources(no_meta) == []
