"""Central error boundary: every unhandled failure becomes one generic 500.

The cause is logged with its stack trace and never sent to the client.
Werkzeug HTTP errors (unknown route, wrong method) keep their own status.
"""
from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from monopoly import db


def register_error_handlers(flask_app):
    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        if isinstance(exc, HTTPException):
            return exc
        db.session.rollback()
        current_app.logger.error(f"Error: {exc}", exc_info=exc)
        return jsonify({'error': 'An internal server error occurred'}), 500
