"""
Main entry point for the FastAPI application.
Run this file to start the chat server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn src.fastapi_app:app --host 0.0.0.0 --port 1337 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from src.config.settings import get_config

if __name__ == "__main__":
    settings = get_config()
    debug = settings.DEBUG

    print(f"Starting chat server in {settings.APP_ENV} mode...")
    print(f"Server running on http://{settings.HOST}:{settings.PORT}")
    print(f"API docs available at http://{settings.HOST}:{settings.PORT}/docs")

    uvicorn.run(
        "src.fastapi_app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=debug,
        log_level="info" if debug else "warning",
    )
