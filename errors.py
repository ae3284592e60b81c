"""
Error types for the certificate portal and their mapping to HTTP responses.
Every user-facing failure renders through templates/error.html.
"""
import logging

from flask import render_template
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound

from models import db


class CertificateError(Exception):
    """Base error for certificate operations."""
    status_code = 500
    default_message = 'Something went wrong.'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class CertificateNotFound(CertificateError):
    status_code = 404
    default_message = 'Certificate not found'


class DuplicateCertificateId(CertificateError):
    # Rendered through the error view but kept at 200, the status the
    # create form has always answered a rejected insert with
    status_code = 200

    def __init__(self, cert_id):
        super().__init__(f"Certificate ID '{cert_id}' already exists")
        self.cert_id = cert_id


class StorageUnavailable(CertificateError):
    status_code = 503
    default_message = 'Certificate storage is unavailable. Please try again later.'


def render_error(message, status_code):
    return render_template('error.html', message=message, status_code=status_code), status_code


def register_error_handlers(app) -> None:
    """Attach the error-to-response mapping to the Flask app."""

    @app.errorhandler(CertificateError)
    def _certificate_error(err):
        if err.status_code >= 500:
            logging.error(f'[ERROR] {err.message}')
        return render_error(err.message, err.status_code)

    @app.errorhandler(SQLAlchemyError)
    def _storage_error(err):
        db.session.rollback()
        logging.exception('[DB] Storage call failed')
        return render_error(StorageUnavailable.default_message, StorageUnavailable.status_code)

    @app.errorhandler(NotFound)
    def _not_found(err):
        return render_error('Page not found', 404)

    @app.errorhandler(Exception)
    def _unexpected(err):
        # Let werkzeug's own HTTP errors (405, 400...) keep their status
        if isinstance(err, HTTPException):
            return render_error(err.description, err.code)
        logging.exception('[ERROR] Unhandled exception')
        return render_error('Internal server error', 500)
