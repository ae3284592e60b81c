"""
Certificate repository: every read and write of the certificates table.
All lookups go through the ORM so user input is always a bound parameter.
"""
import logging
import time
from typing import List, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError

from errors import CertificateNotFound, DuplicateCertificateId
from models import db, Certificate

CERTIFICATE_FIELDS = ('cert_id', 'name', 'project', 'start_date', 'end_date', 'issue_date', 'signature', 'notes')

# SQLite INTEGER is a signed 64-bit value
MIN_KEY = -2 ** 63
MAX_KEY = 2 ** 63 - 1


def default_public_id(prefix: Optional[str] = None) -> str:
    """Time-derived public id, e.g. ALX-1761900000000."""
    if prefix is None:
        prefix = current_app.config.get('CERT_ID_PREFIX', 'ALX')
    return f"{prefix}-{int(time.time() * 1000)}"


def count_certificates() -> int:
    return db.session.query(Certificate.id).count()


def list_summaries() -> List[dict]:
    """Summaries for the home page, newest first."""
    rows = Certificate.query.order_by(Certificate.id.desc()).all()
    return [c.to_summary() for c in rows]


def list_public_summaries() -> List[dict]:
    rows = Certificate.query.order_by(Certificate.id.desc()).all()
    return [c.to_public_summary() for c in rows]


def get_full_list() -> List[Certificate]:
    return Certificate.query.order_by(Certificate.id.desc()).all()


def get_by_public_id(cert_id: str) -> Optional[Certificate]:
    if not cert_id:
        return None
    return Certificate.query.filter_by(cert_id=cert_id).first()


def require_by_public_id(cert_id: str) -> Certificate:
    cert = get_by_public_id(cert_id)
    if cert is None:
        raise CertificateNotFound()
    return cert


def get_by_internal_key(key: int) -> Optional[Certificate]:
    if not MIN_KEY <= key <= MAX_KEY:
        return None
    return db.session.get(Certificate, key)


def get_verification_summary(cert_id: str) -> Optional[dict]:
    """Low-disclosure lookup: only the columns a verifier may see are selected."""
    if not cert_id:
        return None
    row = (
        db.session.query(Certificate.cert_id, Certificate.name, Certificate.project, Certificate.issue_date)
        .filter(Certificate.cert_id == cert_id)
        .first()
    )
    if row is None:
        return None
    return dict(row._asdict())


def insert_certificate(fields: dict) -> int:
    """Insert a certificate and return its internal key.

    A missing or empty cert_id gets a time-derived default. Raises
    DuplicateCertificateId when the public id is already taken.
    """
    values = {key: fields.get(key) for key in CERTIFICATE_FIELDS}
    if not values['cert_id']:
        values['cert_id'] = default_public_id()

    cert = Certificate(**values)
    db.session.add(cert)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        logging.warning(f"[CERTIFICATE] Duplicate cert_id rejected: {values['cert_id']}")
        raise DuplicateCertificateId(values['cert_id'])
    logging.info(f"[CERTIFICATE] Created {cert.cert_id} (id={cert.id})")
    return cert.id


def delete_certificate(key: int) -> bool:
    """Delete by internal key. Returns False, without error, when nothing matched."""
    if not MIN_KEY <= key <= MAX_KEY:
        return False
    deleted = Certificate.query.filter_by(id=key).delete()
    db.session.commit()
    if deleted:
        logging.info(f"[CERTIFICATE] Deleted id={key}")
    return bool(deleted)
