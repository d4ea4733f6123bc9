# backend/models/base_model.py
from datetime import datetime, timezone
from enum import Enum

from database import db


def utcnow():
    return datetime.now(timezone.utc)


def isoformat(dt):
    return dt.isoformat() if dt else None


class RecordState(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class RecordMixin:
    """Timestamps and soft-delete lifecycle shared by every table.

    Every read path goes through ``active()`` so deleted rows never surface.
    Each model also declares a ``version`` column used as SQLAlchemy's
    ``version_id_col``: updates only apply if the row still has the version
    that was read.
    """

    id = db.Column(db.Integer, primary_key=True)
    record_state = db.Column(db.String(16), nullable=False, default=RecordState.ACTIVE.value, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
    deleted_at = db.Column(db.DateTime(timezone=True), nullable=True)

    @classmethod
    def active(cls):
        return cls.query.filter(cls.record_state == RecordState.ACTIVE.value)

    @classmethod
    def get_active(cls, record_id):
        return cls.active().filter(cls.id == record_id).first()

    @property
    def is_deleted(self):
        return self.record_state == RecordState.DELETED.value

    def mark_deleted(self):
        self.record_state = RecordState.DELETED.value
        self.deleted_at = utcnow()
