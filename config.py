"""
Configuration for the Certificate Portal
========================================

Settings are read from the environment once, when the Flask app is built.
The session secret and the admin password have no fallback: the app refuses
to start without them.
"""

import os
from pathlib import Path

BASE_DIR = Path(__file__).parent
DEFAULT_DATABASE_PATH = BASE_DIR / 'data' / 'certs.db'

# Server settings used by run_server.py
SERVER_DEFAULTS = {
    'host': '0.0.0.0',
    'port': 3000,
    'debug': False,
    'threaded': True,
}

REQUIRED_KEYS = ('SECRET_KEY', 'ADMIN_PASSWORD')

TRUTHY = ('true', '1', 'yes', 'on')


class ConfigError(RuntimeError):
    """Raised when a required setting is missing."""


def _env_flag(name, default):
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in TRUTHY


def normalize_database_url(url):
    """Rewrite Heroku-style postgres:// URLs so SQLAlchemy accepts them."""
    if not isinstance(url, str) or not url:
        return url
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def load_config(overrides=None) -> dict:
    """Build the Flask config mapping.

    Explicit ``overrides`` take precedence over environment variables.
    Raises ConfigError naming every required key that has no value.
    """
    overrides = dict(overrides or {})

    config = {
        'SECRET_KEY': os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY'),
        'ADMIN_PASSWORD': os.environ.get('ADMIN_PASSWORD'),
        'SQLALCHEMY_DATABASE_URI': normalize_database_url(os.environ.get('DATABASE_URL'))
        or f"sqlite:///{DEFAULT_DATABASE_PATH}",
        'SQLALCHEMY_TRACK_MODIFICATIONS': False,
        'CERT_ID_PREFIX': os.environ.get('CERT_ID_PREFIX', 'ALX'),
        'SEED_EXAMPLE_CERTIFICATE': _env_flag('SEED_EXAMPLE_CERTIFICATE', True),
        'SESSION_COOKIE_HTTPONLY': True,
        'SESSION_COOKIE_SAMESITE': 'Lax',
    }
    config.update(overrides)

    missing = [key for key in REQUIRED_KEYS if not config.get(key)]
    if missing:
        raise ConfigError(
            f"Missing required settings: {', '.join(missing)}. "
            "Set SESSION_SECRET and ADMIN_PASSWORD in the environment."
        )
    return config


def get_server_config():
    """Returns server settings with environment overrides"""
    config = SERVER_DEFAULTS.copy()

    if 'PORT' in os.environ:
        config['port'] = int(os.environ['PORT'])

    if 'FLASK_DEBUG' in os.environ:
        config['debug'] = os.environ['FLASK_DEBUG'].lower() in TRUTHY

    if 'FLASK_HOST' in os.environ:
        config['host'] = os.environ['FLASK_HOST']

    return config
