"""Flask application entry point."""

import logging
import sqlite3

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import NotFound

from .config import DEFAULT_JWT_SECRET, settings
from .db import init_db
from .exceptions import (
    AuthenticationError,
    BloglistError,
    DatabaseError,
    PermissionDenied,
    ResourceNotFound,
    ValidationError,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Create Flask app
app = Flask(__name__)

# CORS configuration
CORS(app, origins=settings.cors_origins, supports_credentials=True)

if settings.jwt_secret_key == DEFAULT_JWT_SECRET:
    logger.warning("JWT_SECRET_KEY is not set; using the insecure default secret")


# Database initialization (runs once on app startup)
def initialize_database():
    """Initialize database on app startup."""
    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


with app.app_context():
    initialize_database()


# Error handlers
@app.errorhandler(ValidationError)
def handle_validation_error(error):
    """Handle ValidationError (and ConflictError) exceptions."""
    return jsonify({"error": error.message}), 400


@app.errorhandler(AuthenticationError)
def handle_authentication_error(error):
    """Handle AuthenticationError exceptions."""
    return jsonify({"error": error.message}), 401


@app.errorhandler(PermissionDenied)
def handle_permission_denied(error):
    """Handle PermissionDenied exceptions."""
    return jsonify({"error": error.message}), 403


@app.errorhandler(ResourceNotFound)
def handle_not_found(error):
    """Handle ResourceNotFound exceptions with an empty body."""
    return "", 404


@app.errorhandler(NotFound)
def handle_unknown_endpoint(error):
    """Handle requests to routes that do not exist."""
    return jsonify({"error": "unknown endpoint"}), 404


@app.errorhandler(DatabaseError)
@app.errorhandler(sqlite3.OperationalError)
def handle_database_error(error):
    """Handle store failures; the client may retry."""
    logger.error(f"Database error: {error}")
    return jsonify({"error": "database unavailable"}), 503


@app.errorhandler(BloglistError)
def handle_bloglist_error(error):
    """Handle any other application error without leaking details."""
    logger.error(f"{error.__class__.__name__}: {error.message} {error.details}")
    return jsonify({"error": "An internal error occurred"}), 500


@app.errorhandler(500)
def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({"error": "An internal error occurred"}), 500


# Health check endpoint
@app.route("/health")
def health():
    """Health check endpoint."""
    return jsonify({"status": "ok"})


# Register API blueprints
from .auth.api import auth_bp  # noqa: E402
from .blogs.api import blogs_bp  # noqa: E402

app.register_blueprint(auth_bp, url_prefix=settings.api_prefix)
app.register_blueprint(blogs_bp, url_prefix=f"{settings.api_prefix}/blogs")


if __name__ == "__main__":
    app.run(debug=True)
