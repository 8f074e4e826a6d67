"""
AI components for the Career Compass backend.

There is one workflow: a single Gemini call with a structured-output schema
per guidance action. No agent framework, tools or multi-turn chat.
"""
