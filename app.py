"""Verity - Streamlit webapp for AI-assisted misinformation analysis."""

import sys
from pathlib import Path

# Ensure the package is importable and load .env before any code reads env vars
sys.path.insert(0, str(Path(__file__).resolve().parent))

from dotenv import load_dotenv
load_dotenv(Path(__file__).resolve().parent / ".env")

import streamlit as st

from verity.config import configure_logging, load_settings
from verity.controller import AnalysisController
from verity.education import EDUCATIONAL_CONTENT
from verity.errors import ConfigurationError
from verity.gemini_client import create_client
from verity.models import ContentType, RiskLevel
from verity.report_generator import RISK_LABELS, generate_html_report
from verity.utils import truncate_text

# Page config - must be first Streamlit command
st.set_page_config(
    page_title="Verity",
    page_icon="🔎",
    layout="centered",
)

# Missing credentials are fatal: show why and stop the script
try:
    SETTINGS = load_settings()
except ConfigurationError as e:
    st.error(f"Configuration error: {e}")
    st.stop()

configure_logging(SETTINGS.log_level)


@st.cache_resource
def get_gemini_client():
    """One Gemini client per server process, shared across sessions."""
    return create_client(SETTINGS)


# Session state: one controller per browser session
if "controller" not in st.session_state:
    st.session_state.controller = AnalysisController(
        client=get_gemini_client(),
        model=SETTINGS.model,
    )
controller: AnalysisController = st.session_state.controller

st.markdown("""
<style>
.risk-card { padding: 1rem 1.25rem; border-radius: 10px; border: 1px solid; margin-bottom: 1rem; }
.risk-card h3 { margin: 0; font-size: 1.25rem; }
.risk-high { color: #f87171; background: rgba(239, 68, 68, 0.1); border-color: rgba(248, 113, 113, 0.3); }
.risk-medium { color: #facc15; background: rgba(234, 179, 8, 0.1); border-color: rgba(250, 204, 21, 0.3); }
.risk-low { color: #4ade80; background: rgba(34, 197, 94, 0.1); border-color: rgba(74, 222, 128, 0.3); }
.risk-unknown { color: #38bdf8; background: rgba(14, 165, 233, 0.1); border-color: rgba(56, 189, 248, 0.3); }
.footer-note { text-align: center; color: #64748b; font-size: 0.85rem; margin-top: 2rem; }
</style>
""", unsafe_allow_html=True)

RISK_ICONS = {
    RiskLevel.HIGH: "⚠️",
    RiskLevel.MEDIUM: "⚠️",
    RiskLevel.LOW: "✅",
    RiskLevel.UNKNOWN: "ℹ️",
}

with st.sidebar:
    st.markdown("### 🔎 Verity")
    st.caption("A secured research assistant for spotting misinformation.")
    st.divider()
    if st.button("🗑️ Clear results", use_container_width=True, key="clear_results"):
        controller.reset()
        st.rerun()

st.title("🔎 Verity")
st.markdown(
    "Enter a news headline, a URL, or any content below. Our secured research assistant "
    "will analyze it for potential signs of misinformation and provide a detailed breakdown."
)

tab_text, tab_url = st.tabs(["📝 Analyze Text", "🔗 Analyze URL"])
submitted = None
with tab_text:
    with st.form("analyze_text_form"):
        text_input = st.text_area(
            "Text to analyze",
            height=160,
            max_chars=50000,
            placeholder="Paste a news headline, social media post, or any text snippet here...",
            label_visibility="collapsed",
        )
        if st.form_submit_button(
            "Analyze Text", type="primary", use_container_width=True,
            disabled=controller.is_analyzing,
        ):
            submitted = (text_input, ContentType.TEXT)
with tab_url:
    with st.form("analyze_url_form"):
        url_input = st.text_input(
            "URL to analyze",
            placeholder="https://example.com/news-article",
            label_visibility="collapsed",
        )
        if st.form_submit_button(
            "Analyze URL", type="primary", use_container_width=True,
            disabled=controller.is_analyzing,
        ):
            submitted = (url_input, ContentType.URL)

if submitted is not None:
    content, content_type = submitted
    with st.spinner("Your secured research assistant is analyzing..."):
        controller.submit((content or "").strip(), content_type)

if controller.error:
    st.error(controller.error)

result = controller.result
if result is not None:
    risk = result.risk_level
    st.markdown(
        f'<div class="risk-card risk-{risk.value.lower()}"><h3>{RISK_ICONS[risk]} {RISK_LABELS[risk]}</h3></div>',
        unsafe_allow_html=True,
    )
    st.subheader("Summary")
    st.write(result.summary)
    if result.details:
        st.subheader("Detailed Analysis")
        for point in result.details:
            st.markdown(f"- {point}")
    if result.sources:
        st.subheader("Sources")
        for source in result.sources:
            st.markdown(f"- [{truncate_text(source.title, 120)}]({source.uri})")

    st.download_button(
        "Download report (HTML)",
        data=generate_html_report(result, controller.transcript),
        file_name="verity_report.html",
        mime="text/html",
        use_container_width=True,
        key="download_report",
    )
    st.caption("Open the file in a browser and use Print → Save as PDF to get a PDF.")

    if controller.session is not None:
        st.divider()
        st.subheader("Follow-up Assistant")
        for msg in controller.transcript:
            with st.chat_message("user" if msg.role == "user" else "assistant"):
                st.markdown(msg.text)
        prompt = st.chat_input(
            "Ask a follow-up question...",
            disabled=controller.chat_pending,
        )
        if prompt and prompt.strip():
            with st.chat_message("user"):
                st.markdown(prompt)
            with st.chat_message("assistant"):
                placeholder = st.empty()
                placeholder.markdown("_Thinking..._")
                for transcript in controller.send_message(prompt):
                    placeholder.markdown(transcript[-1].text)
            # redraw so the report download picks up the finished reply
            st.rerun()

st.divider()
st.subheader("How to Spot Misinformation")
for item in EDUCATIONAL_CONTENT:
    with st.expander(item.title):
        st.write(item.content)

st.markdown(
    '<div class="footer-note">Powered by Google Gemini. This tool provides an analysis '
    "and is not a definitive judgment.</div>",
    unsafe_allow_html=True,
)
