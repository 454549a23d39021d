"""
Chart Geometry — API Runner.

Usage:
    python run.py          → Start the FastAPI geometry service
    python run.py api      → Same as above
"""

import sys

import uvicorn

from chart_geometry.core.config import settings


def run_fastapi() -> None:
    """Start the FastAPI geometry service."""
    print(f"🚀 FastAPI → http://{settings.API_HOST}:{settings.API_PORT}")
    if settings.DEBUG:
        print(f"📄 Docs    → http://{settings.API_HOST}:{settings.API_PORT}/api/docs")
    uvicorn.run(
        "chart_geometry.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    mode = sys.argv[1].lower() if len(sys.argv) > 1 else "api"
    runners = {"api": run_fastapi}
    runner = runners.get(mode)
    if runner is None:
        print(f"Unknown mode '{mode}'. Use: api")
        sys.exit(1)
    runner()
