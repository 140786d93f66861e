"""Core logic for JSON2CSV.

The Gradio UI lives in `app.py`. This package contains:
- the JSON -> CSV converter (pure functions, no I/O)
- the FastAPI endpoint exposing it
- Gradio callbacks, file helpers and settings
"""
