"""Shared columns and JSON helpers for the directory models."""
from datetime import date, datetime

from cadenza.extensions import db


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class SerializerMixin:
    """
    `WRITABLE_FIELDS` lists the columns a client payload may set.
    `HIDDEN_FIELDS` never leave the server.
    """

    WRITABLE_FIELDS = ()
    HIDDEN_FIELDS = ()

    def to_dict(self):
        data = {}
        for column in self.__table__.columns:
            if column.key in self.HIDDEN_FIELDS:
                continue
            value = getattr(self, column.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            data[column.key] = value
        return data

    @classmethod
    def writable(cls, payload):
        """Keep only the keys of `payload` a client may write."""
        if not isinstance(payload, dict):
            return {}
        return {key: value for key, value in payload.items() if key in cls.WRITABLE_FIELDS}

    def apply(self, payload):
        """Partial update: only the keys present in `payload` change."""
        for key, value in self.writable(payload).items():
            setattr(self, key, value)
        return self
