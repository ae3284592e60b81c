from flask_sqlalchemy import SQLAlchemy
from flask_login import UserMixin

db = SQLAlchemy()

DEFAULT_SIGNATURE = 'Authorized Signatory'


class AdminUser(UserMixin):
    """The single admin identity. There is no account table: holding the
    shared admin password is what makes a session 'admin'."""

    id = 'admin'

    def get_id(self):
        return self.id


class Certificate(db.Model):
    __tablename__ = 'certificates'
    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    cert_id = db.Column(db.Text, unique=True)
    name = db.Column(db.Text)
    project = db.Column(db.Text)
    # Display strings, never parsed as dates
    start_date = db.Column(db.Text)
    end_date = db.Column(db.Text)
    issue_date = db.Column(db.Text)
    signature = db.Column(db.Text)
    notes = db.Column(db.Text)

    @property
    def signature_label(self):
        return self.signature or DEFAULT_SIGNATURE

    def to_summary(self):
        return {
            'id': self.id,
            'cert_id': self.cert_id,
            'name': self.name,
            'project': self.project,
            'issue_date': self.issue_date,
        }

    def to_public_summary(self):
        """Fields safe to show an anonymous visitor: no internal key, signature or notes."""
        return {
            'cert_id': self.cert_id,
            'name': self.name,
            'project': self.project,
            'issue_date': self.issue_date,
        }

    def to_dict(self):
        return {
            'id': self.id,
            'cert_id': self.cert_id,
            'name': self.name,
            'project': self.project,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'issue_date': self.issue_date,
            'signature': self.signature,
            'notes': self.notes,
        }

    def __repr__(self):
        return f'<Certificate {self.id} {self.cert_id}>'
