"""
Great-Circle Distance Service
=============================
Entry point. Run with: python main.py  (or uvicorn main:app --port 4000)
"""

import uvicorn

from src.api.app import create_app
from src.config import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
