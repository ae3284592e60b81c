"""
Database bootstrap for the certificate portal: table creation and the
one-time example record.
"""
import logging
from pathlib import Path

from sqlalchemy.engine import make_url

from certificate import count_certificates
from models import db, Certificate

EXAMPLE_CERTIFICATE = {
    'cert_id': 'ALX-2025-001',
    'name': 'Lucky KN',
    'project': 'CartoonBot Automation',
    'start_date': '01 Oct 2025',
    'end_date': '31 Oct 2025',
    'issue_date': '31 Oct 2025',
    'signature': 'Authorized Signatory',
    'notes': 'Seeded entry',
}


def ensure_sqlite_directory(uri: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(uri)
    if url.get_backend_name() != 'sqlite':
        return
    database = url.database
    if not database or database == ':memory:':
        return
    Path(database).parent.mkdir(parents=True, exist_ok=True)


def seed_example_certificate() -> bool:
    """Insert the demonstration record when the table is empty.

    Guarded by a row count, so restarts never seed twice. Two processes
    starting against an empty table at the same time could both seed.
    """
    if count_certificates() > 0:
        return False
    db.session.add(Certificate(**EXAMPLE_CERTIFICATE))
    db.session.commit()
    logging.info(f"[DB INIT] Seeded example certificate {EXAMPLE_CERTIFICATE['cert_id']}")
    return True


def init_db(app) -> None:
    """Create tables if they don't exist and seed the example record."""
    ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
    with app.app_context():
        db.create_all()
        if app.config.get('SEED_EXAMPLE_CERTIFICATE', True):
            seed_example_certificate()
    logging.info("[DB INIT] Database schema initialized.")
