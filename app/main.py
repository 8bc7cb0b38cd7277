"""ASGI entry point.

Run with:
    uvicorn main:app --host 0.0.0.0 --port 8000
"""

from server.server import create_app

app = create_app()
