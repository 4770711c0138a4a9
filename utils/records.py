"""
Records Module - Ownership-scoped CRUD for portfolio sections

Every portfolio section (education, experience, skills, projects,
certifications, languages) is served by one OwnedRecordService. Lists are
public; create/update/delete act only on records owned by the session user.
"""

from flask import current_app
from extensions import db
from models import Education, Experience, Skill, Project, Certification, Language
from .errors import ValidationError, Unauthorized, Forbidden, NotFound
from .helpers import clean_str, split_items
from .data import record_to_dict


class Field:
    """Writable field of a portfolio record"""

    def __init__(self, key, column=None, required=False, default='', nullable=False,
                 max_length=255, normalize=clean_str):
        self.key = key
        self.column = column or key
        self.required = required
        self.default = default
        self.nullable = nullable
        self.max_length = max_length
        self.normalize = normalize

    def clean(self, value):
        value = self.normalize(value)
        if value is None and not self.nullable:
            value = self.default
        if self.required and not value:
            raise ValidationError(f"{self.key} is required")
        if isinstance(value, str):
            if self.max_length and len(value) > self.max_length:
                raise ValidationError(f"{self.key} must be at most {self.max_length} characters")
            if self.nullable and not value:
                return None
        return value


class OwnedRecordService:
    """CRUD over one record type, scoped by owning user id"""

    def __init__(self, name, model, fields):
        self.name = name
        self.model = model
        self.fields = fields

    def to_dict(self, record):
        return record_to_dict(record, self.fields)

    def list(self, owner_id):
        """All records of owner_id in creation order"""
        if not owner_id:
            return []
        return (self.model.query
                .filter_by(user_id=owner_id)
                .order_by(self.model.created_at.asc(), self.model.id.asc())
                .all())

    def get(self, record_id):
        record = db.session.get(self.model, record_id)
        if record is None:
            raise NotFound(f"{self.name.capitalize()} item not found")
        return record

    def create(self, session_user_id, payload):
        """Create a record owned by session_user_id; payload userId/id are ignored"""
        self._require_session(session_user_id)
        values = self._clean(payload, partial=False)
        record = self.model(user_id=session_user_id, **values)
        db.session.add(record)
        db.session.commit()
        current_app.logger.info(f"Created {self.name} {record.id} for user {session_user_id}")
        return record

    def update(self, session_user_id, record_id, payload):
        self._require_session(session_user_id)
        values = self._clean(payload, partial=True)
        record = self._get_owned(session_user_id, record_id)
        for column, value in values.items():
            setattr(record, column, value)
        db.session.commit()
        current_app.logger.info(f"Updated {self.name} {record.id} for user {session_user_id}")
        return record

    def delete(self, session_user_id, record_id):
        self._require_session(session_user_id)
        record = self._get_owned(session_user_id, record_id)
        db.session.delete(record)
        db.session.commit()
        current_app.logger.info(f"Deleted {self.name} {record_id} for user {session_user_id}")

    def _require_session(self, session_user_id):
        if not session_user_id:
            raise Unauthorized()

    def _get_owned(self, session_user_id, record_id):
        record = self.get(record_id)
        if record.user_id != session_user_id:
            current_app.logger.warning(
                f"User {session_user_id} attempted to modify {self.name} {record_id} owned by {record.user_id}")
            raise Forbidden()
        return record

    def _clean(self, payload, partial):
        """Validate payload into {column: value}; nothing is written on failure"""
        if not isinstance(payload, dict):
            raise ValidationError('Request body must be a JSON object')
        values = {}
        for field in self.fields:
            if field.key in payload:
                values[field.column] = field.clean(payload[field.key])
            elif not partial:
                if field.required:
                    raise ValidationError(f"{field.key} is required")
                values[field.column] = field.default
        if partial and not values:
            raise ValidationError('No updatable fields provided')
        return values


education_service = OwnedRecordService('education', Education, [
    Field('institution', required=True),
    Field('degree', required=True),
    Field('year', max_length=100),
])

experience_service = OwnedRecordService('experience', Experience, [
    Field('company', required=True),
    Field('role', required=True),
    Field('duration', max_length=100),
    Field('description', max_length=None),
])

skill_service = OwnedRecordService('skill', Skill, [
    Field('category', required=True),
    Field('items', required=True, default=None, max_length=None, normalize=split_items),
])

project_service = OwnedRecordService('project', Project, [
    Field('title', required=True),
    Field('description', max_length=None),
    Field('link', default=None, nullable=True, max_length=500),
])

certification_service = OwnedRecordService('certification', Certification, [
    Field('title', required=True),
    Field('issuer'),
])

language_service = OwnedRecordService('language', Language, [
    Field('language', required=True, max_length=100),
    Field('proficiency', default='Native/Fluent', max_length=100),
])

# URL segment -> service
RECORD_SERVICES = {
    'education': education_service,
    'experience': experience_service,
    'skills': skill_service,
    'projects': project_service,
    'certifications': certification_service,
    'languages': language_service,
}


__all__ = [
    'Field',
    'OwnedRecordService',
    'RECORD_SERVICES',
    'education_service',
    'experience_service',
    'skill_service',
    'project_service',
    'certification_service',
    'language_service'
]
