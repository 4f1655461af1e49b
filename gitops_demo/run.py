"""
Process entry point for the demo service.

Usage:
    python -m gitops_demo
    gitops-demo

Environment variables:
    VERSION: Version string reported by the service (default: 2.0)
    PORT: Port to bind to (default: 3000)
    HOST: Interface to bind to (default: 0.0.0.0)
"""
import os
import sys
import logging

from gitops_demo.app import create_app

DEFAULT_PORT = 3000

logger = logging.getLogger(__name__)


def get_port():
    port = int(os.environ.get("PORT", DEFAULT_PORT))
    if not 0 < port < 65536:
        raise ValueError(f"port out of range: {port}")
    return port


def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        port = get_port()
    except ValueError as e:
        logger.error(f"Invalid PORT: {e}")
        sys.exit(1)
    host = os.environ.get("HOST", "0.0.0.0")

    app = create_app()
    logger.info(f"Server running on port {port} - Version {app.config['VERSION']}")
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
