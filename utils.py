"""
Shared helpers and Jinja filter registration for the certificate portal.
"""
from typing import Optional
import hmac
from functools import wraps

from flask import current_app, redirect, request, url_for
from flask_login import current_user
from werkzeug.routing import BuildError


def safe_url_for(endpoint: str, **values) -> str:
    """Return a safe URL or '#' if the endpoint build fails."""
    try:
        return url_for(endpoint, **values)
    except BuildError:
        return '#'


def check_admin_password(password: Optional[str]) -> bool:
    """Compare a submitted password with the configured admin secret in constant time."""
    expected = current_app.config.get('ADMIN_PASSWORD') or ''
    if not password or not expected:
        return False
    return hmac.compare_digest(password.encode('utf-8'), expected.encode('utf-8'))


def is_admin(user=None) -> bool:
    if user is None:
        user = current_user
    if not user or not user.is_authenticated:
        return False

    # Import here to avoid circular imports
    from models import AdminUser

    return isinstance(user, AdminUser)


def admin_required(f):
    """Decorator for admin routes: anyone without an admin session is sent
    to the login page and the wrapped view never runs.

    Usage:
        @admin_required
        def my_protected_route():
            ...
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not is_admin():
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return decorated_function


def submitted_fields() -> dict:
    """Request body as a flat dict, from either a form post or a JSON body."""
    if request.is_json:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return {}
        return {key: (str(value) if value is not None else None) for key, value in data.items()}
    return request.form.to_dict()


def register_jinja_filters(app) -> None:
    """Register common Jinja globals on the provided Flask app: `safe_url_for` and `is_admin`."""
    app.jinja_env.globals['safe_url_for'] = safe_url_for
    app.jinja_env.globals['is_admin'] = is_admin
