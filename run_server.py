#!/usr/bin/env python3
"""
Certificate Portal Runner
=========================

Main entry point for running the certificate portal Flask application.

Usage:
    python run_server.py               # Run with default settings
    python run_server.py --debug       # Run in debug mode
    python run_server.py --port 8000   # Run on custom port

Environment Variables:
    SESSION_SECRET  - Session signing secret (required)
    ADMIN_PASSWORD  - Shared admin password (required)
    DATABASE_URL    - SQLAlchemy URL (default: sqlite file under ./data)
    PORT            - Server port (default: 3000)
    FLASK_DEBUG     - Enable debug mode (default: False)
    LOG_LEVEL       - Logging level (default: INFO)
"""

import os
import sys
import argparse
import logging

from config import ConfigError, get_server_config


def configure_logging(level_name='INFO'):
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def print_startup_banner(app, host, port, debug):
    print("=" * 60)
    print("CERTIFICATE PORTAL - FLASK APPLICATION")
    print("=" * 60)
    print(f"Server: http://{host}:{port}")
    print(f"Debug Mode: {debug}")
    print(f"Working Directory: {os.getcwd()}")
    print("=" * 60)

    rules = sorted(f"{r.rule} -> {','.join(sorted(r.methods - {'HEAD', 'OPTIONS'}))}" for r in app.url_map.iter_rules())
    print("Registered routes:")
    for line in rules:
        print("  -", line)
    print("=" * 60)


def main(argv=None):
    """Main entry point for the Flask application"""
    parser = argparse.ArgumentParser(description='Run the certificate portal')
    parser.add_argument('--port', type=int, default=None, help='Port to run on')
    parser.add_argument('--debug', action='store_true', help='Enable debug mode')
    parser.add_argument('--host', default=None, help='Host to bind to')
    args = parser.parse_args(argv)

    configure_logging(os.environ.get('LOG_LEVEL', 'INFO'))
    server = get_server_config()
    port = args.port or server['port']
    host = args.host or server['host']
    debug = args.debug or server['debug']

    from app import create_app
    try:
        app = create_app()
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    print_startup_banner(app, host, port, debug)
    try:
        app.run(host=host, port=port, debug=debug, threaded=server['threaded'], use_reloader=debug)
    except KeyboardInterrupt:
        print("\nServer stopped by user")
    return 0


if __name__ == '__main__':
    sys.exit(main())
