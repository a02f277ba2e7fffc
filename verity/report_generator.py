"""Generate a self-contained HTML report of an analysis (print-friendly for Save as PDF)."""

import html
from typing import List, Optional

from .models import AnalysisResult, ChatMessage, ContentType, RiskLevel

MAX_INPUT_DISPLAY = 15000  # truncate very long input in report

RISK_LABELS = {
    RiskLevel.HIGH: "High Risk of Misinformation",
    RiskLevel.MEDIUM: "Medium Risk / Caution Advised",
    RiskLevel.LOW: "Low Risk of Misinformation",
    RiskLevel.UNKNOWN: "Analysis Result",
}


def _input_section(result: AnalysisResult) -> str:
    content = (result.original_content or "").strip()
    if not content:
        return ""
    if len(content) > MAX_INPUT_DISPLAY:
        content = content[:MAX_INPUT_DISPLAY] + "\n\n[... truncated for report ...]"
    if result.original_type is ContentType.URL and content.startswith(("http://", "https://")):
        esc = html.escape(content)
        body = f'<p class="meta-line"><strong>URL analyzed:</strong> <a href="{esc}">{esc}</a></p>'
    else:
        body = (
            '<p class="meta-line"><strong>Text analyzed:</strong></p>'
            f'<pre class="input-text">{html.escape(content)}</pre>'
        )
    return f'<section class="section-block"><h2>Analyzed content</h2><div class="meta-block">{body}</div></section>'


def _transcript_section(transcript: Optional[List[ChatMessage]]) -> str:
    if not transcript:
        return ""
    rows = ""
    for msg in transcript:
        who = "You" if msg.role == "user" else "Assistant"
        rows += (
            f'<div class="chat-turn chat-{html.escape(msg.role)}">'
            f"<strong>{who}:</strong> {html.escape(msg.text)}</div>"
        )
    return f'<section class="section-block"><h2>Follow-up questions</h2>{rows}</section>'


def generate_html_report(
    result: AnalysisResult,
    transcript: Optional[List[ChatMessage]] = None,
) -> str:
    """
    Build a single self-contained HTML report: analyzed content, risk level,
    summary, detailed analysis, sources and (optionally) the follow-up chat.
    """
    risk = result.risk_level
    risk_class = f"risk-{risk.value.lower()}"
    details_html = "".join(f"<li>{html.escape(d)}</li>" for d in result.details)
    sources_html = "".join(
        f'<li><a href="{html.escape(s.uri)}">{html.escape(s.title)}</a></li>' for s in result.sources
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Verity Report</title>
<style>
body {{ font: 15px/1.55 system-ui, sans-serif; color: #1e293b; max-width: 760px; margin: 0 auto; padding: 1.5rem; }}
.report-header {{ display: flex; align-items: baseline; justify-content: space-between; border-bottom: 2px solid #0f766e; margin-bottom: 1.25rem; }}
.report-header h1 {{ font-size: 1.6rem; margin: 0 0 0.5rem; color: #0f766e; }}
h2 {{ font-size: 1.05rem; text-transform: uppercase; letter-spacing: 0.04em; color: #475569; margin: 1.75rem 0 0.5rem; }}
.meta-block {{ border-left: 4px solid #99f6e4; padding: 0.5rem 1rem; margin: 1rem 0; }}
.meta-line {{ margin: 0.3rem 0; }}
.risk-badge {{ display: inline-block; padding: 0.1rem 0.6rem; border-radius: 999px; font-weight: 700; font-size: 0.85rem; }}
.risk-high {{ background: #fee2e2; color: #b91c1c; }}
.risk-medium {{ background: #fef3c7; color: #b45309; }}
.risk-low {{ background: #dcfce7; color: #15803d; }}
.risk-unknown {{ background: #e0f2fe; color: #0369a1; }}
.input-text {{ white-space: pre-wrap; overflow-wrap: anywhere; font-size: 0.88rem; background: #f1f5f9; padding: 0.75rem; margin: 0.4rem 0 0; }}
.chat-turn {{ white-space: pre-wrap; padding: 0.4rem 0.75rem; margin: 0.4rem 0; border-radius: 6px; }}
.chat-user {{ background: #f0fdfa; }}
.chat-model {{ background: #f8fafc; }}
.report-footer {{ margin-top: 2.5rem; font-size: 0.8rem; color: #94a3b8; text-align: center; }}
a {{ color: #0f766e; }}
@media print {{ body {{ font-size: 11pt; padding: 0; }} .chat-turn {{ break-inside: avoid; }} }}
</style>
</head>
<body>
<header class="report-header">
  <h1>Verity Report</h1>
</header>

{_input_section(result)}

<div class="meta-block">
<p class="meta-line"><strong>Risk level:</strong> <span class="risk-badge {risk_class}">{html.escape(risk.value)}</span> ({html.escape(RISK_LABELS[risk])})</p>
<p class="meta-line"><strong>Summary:</strong> {html.escape(result.summary)}</p>
</div>

<section class="section-block">
<h2>Detailed analysis</h2>
{f"<ul>{details_html}</ul>" if details_html else "<p>No detailed points returned.</p>"}
</section>

<section class="section-block">
<h2>Sources</h2>
{f"<ul>{sources_html}</ul>" if sources_html else "<p>No web sources were cited.</p>"}
</section>

{_transcript_section(transcript)}

<footer class="report-footer">
Generated by Verity. This is an AI-assisted analysis, not a definitive judgment.
</footer>
</body>
</html>
"""
