# app.py
# Launches the clienticon lookup service with uvicorn
# Run with: python -m clienticon.app

import uvicorn

from .config import DEBUG, PORT


def run(host: str = "127.0.0.1", port: int = PORT, reload: bool = DEBUG):
    """Serve clienticon.main:app. Local only by default since it reads a local cache."""
    uvicorn.run("clienticon.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
