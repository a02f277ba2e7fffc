"""Verity: AI-assisted misinformation analysis on top of Gemini with Google Search."""
