#!/usr/bin/env python3
"""
Startup script for the Light-Aware Routing API server.

This script starts the FastAPI server with proper configuration.
"""

import argparse

import uvicorn

from api.settings import ApiSettings


def main():
    """Start the FastAPI server."""
    settings = ApiSettings.from_env()

    parser = argparse.ArgumentParser(description="Light-Aware Routing API Server")
    parser.add_argument("--host", default=settings.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")

    args = parser.parse_args()

    print("🚀 Starting Light-Aware Routing API Server")
    print(f"📍 URL: http://{args.host}:{args.port}")
    print(f"📚 Documentation: http://{args.host}:{args.port}/docs")
    print(f"🔍 Health check: http://{args.host}:{args.port}/health")
    print("-" * 50)

    uvicorn.run(
        "api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        access_log=True
    )


if __name__ == "__main__":
    main()
