import os
import logging
from flask import Flask, jsonify

from gitops_demo import __version__

logger = logging.getLogger(__name__)


def create_app(version=None):
    """
    Create the demo Flask application.

    Args:
        version: Version string to report (falls back to the VERSION env var,
            then to the packaged default)

    Returns:
        Flask application instance
    """
    app = Flask(__name__)
    app.config.update(
        VERSION=version or os.environ.get("VERSION", __version__),
    )

    @app.get("/")
    def hello():
        message = f"GitOps Pipeline Working 🚀🔥 Version: {app.config['VERSION']} - Updated!"
        return message, 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.get("/health")
    def health():
        """Liveness and readiness probe target."""
        return jsonify(status="healthy", version=app.config["VERSION"]), 200

    logger.info("Demo app created (version %s)", app.config["VERSION"])
    return app


app = create_app()
