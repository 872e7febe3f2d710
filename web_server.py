"""FastAPI application entrypoint.

Deployments import `web_server:app`; `python web_server.py` runs it locally.
"""
import os

from server.main import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "8000")))
