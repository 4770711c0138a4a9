from extensions import db
from datetime import datetime, timezone
from flask_login import UserMixin
from sqlalchemy import JSON
from sqlalchemy.orm import declared_attr
import uuid


def utcnow():
    """Naive UTC timestamp, matching what SQLite and PostgreSQL columns store"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class User(UserMixin, db.Model):
    __tablename__ = 'users'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = db.Column(db.String(255), unique=True, nullable=False)  # stored lower-cased
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(255), nullable=False)
    # Public profile fields
    title = db.Column(db.String(255), nullable=False, default='')
    summary = db.Column(db.Text, nullable=False, default='')
    location = db.Column(db.String(255), nullable=False, default='')
    phone = db.Column(db.String(50), nullable=False, default='')
    linkedin = db.Column(db.String(500), nullable=False, default='')
    image_url = db.Column(db.String(500), nullable=False, default='')
    cv_url = db.Column(db.String(500), nullable=False, default='')
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    # Relationships
    sessions = db.relationship('AuthSession', backref='user', lazy=True, cascade='all, delete-orphan')
    messages = db.relationship('ContactMessage', backref='recipient', lazy=True, cascade='all, delete-orphan')


class AuthSession(db.Model):
    __tablename__ = 'auth_sessions'
    # SHA-256 of the opaque cookie token; the raw token is never stored
    token_hash = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=utcnow)
    expires_at = db.Column(db.DateTime, nullable=False)


class OwnedRecordMixin:
    """Columns shared by every portfolio section table"""
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    @declared_attr
    def user_id(cls):
        return db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False, index=True)


class Education(OwnedRecordMixin, db.Model):
    __tablename__ = 'education'
    institution = db.Column(db.String(255), nullable=False)
    degree = db.Column(db.String(255), nullable=False)
    year = db.Column(db.String(100), nullable=False, default='')  # or status like "In Progress"


class Experience(OwnedRecordMixin, db.Model):
    __tablename__ = 'experience'
    company = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(255), nullable=False)
    duration = db.Column(db.String(100), nullable=False, default='')
    description = db.Column(db.Text, nullable=False, default='')


class Skill(OwnedRecordMixin, db.Model):
    __tablename__ = 'skills'
    category = db.Column(db.String(255), nullable=False)  # e.g. "Technical", "Soft Skills"
    items = db.Column(SafeJSON, nullable=False, default=list)


class Project(OwnedRecordMixin, db.Model):
    __tablename__ = 'projects'
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    link = db.Column(db.String(500))


class Certification(OwnedRecordMixin, db.Model):
    __tablename__ = 'certifications'
    title = db.Column(db.String(255), nullable=False)
    issuer = db.Column(db.String(255), nullable=False, default='')


class Language(OwnedRecordMixin, db.Model):
    __tablename__ = 'languages'
    language = db.Column(db.String(100), nullable=False)
    proficiency = db.Column(db.String(100), nullable=False, default='Native/Fluent')


class ContactMessage(db.Model):
    __tablename__ = 'contact_messages'
    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(36), db.ForeignKey('users.id'), nullable=False)  # recipient
    sender_name = db.Column(db.String(255), nullable=False)
    sender_email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow)

    # Index for inbox queries
    __table_args__ = (
        db.Index('idx_contact_user_date', 'user_id', 'created_at'),
    )
