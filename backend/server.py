#!/usr/bin/env python3
"""
Backend Server Entry Point

Simple uvicorn launcher for the PR report.
Can be run directly or through ``main.py serve``.

Usage:
    # Default: http://127.0.0.1:8080
    python backend/server.py

    # Custom host/port
    python backend/server.py --host 0.0.0.0 --port 9000

    # Development mode with auto-reload
    python backend/server.py --reload

    # Or use uvicorn directly
    uvicorn backend.app:app --port 8080
"""

import argparse


def run_server(host: str = "127.0.0.1", port: int = 8080, reload: bool = False) -> None:
    """Start uvicorn with the report app."""
    print("=" * 80)
    print("PR Showcase Server")
    print("=" * 80)
    print(f"Report will be available at: http://{host}:{port}/")
    print(f"JSON available at: http://{host}:{port}/api/prs")
    print("")
    print("Press Ctrl+C to stop the server")
    print("=" * 80)
    print("")

    import uvicorn
    uvicorn.run(
        "backend.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def main():
    """Launch the FastAPI report server."""
    parser = argparse.ArgumentParser(
        description="PR Showcase Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default host/port
  python backend/server.py

  # Custom host/port
  python backend/server.py --host 0.0.0.0 --port 9000
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to run the server on (default: 8080)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (development only)"
    )

    args = parser.parse_args()
    run_server(host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
