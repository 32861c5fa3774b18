#!/usr/bin/env python3
"""Run the FastAPI server for the Story Service."""

import argparse
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from story_service.api.config import load_settings  # noqa: E402
from story_service.api.main import run  # noqa: E402


def main():
    """Run the API server."""
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run the Story Service API")
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    run(replace(settings, host=args.host, port=args.port), reload=args.reload)


if __name__ == "__main__":
    main()
