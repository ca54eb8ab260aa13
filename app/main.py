"""ASGI entrypoint.

Run with:
    uvicorn main:server_app --host 0.0.0.0 --port 8000
"""

from dotenv import load_dotenv

from server import server

load_dotenv()

server_app = server.handler
