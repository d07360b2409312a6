"""ASGI entry point.

Run with:
    uvicorn main:server_app --app-dir app --port 3001
or:
    python app/main.py
"""

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from infrastructure.services import get_settings  # noqa: E402  pylint: disable=wrong-import-position
from server import server  # noqa: E402  pylint: disable=wrong-import-position

server_app = server.handler


if __name__ == "__main__":
    uvicorn.run(server_app, host="0.0.0.0", port=get_settings().server.PORT)
