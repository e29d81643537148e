"""User model."""
from flask import current_app
from sqlalchemy.orm import validates
from werkzeug.security import check_password_hash, generate_password_hash

from cadenza.errors import ValidationError
from cadenza.extensions import db
from cadenza.models.base import SerializerMixin, TimestampMixin


def allowed_email_domain():
    return current_app.config['ALLOWED_EMAIL_DOMAIN'].lower()


def is_permitted_email(email):
    """True when `email` is a non-empty address on the configured domain."""
    if not isinstance(email, str) or '@' not in email:
        return False
    return email.lower().endswith('@' + allowed_email_domain())


class User(SerializerMixin, TimestampMixin, db.Model):
    __tablename__ = 'users'

    WRITABLE_FIELDS = ('full_name', 'email', 'is_admin', 'is_cadenza', 'profile_picture')
    HIDDEN_FIELDS = ('password_hash',)

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password_hash = db.Column(db.String(256))  # Null for OAuth-only accounts
    is_admin = db.Column(db.Boolean, default=False, nullable=False)
    is_cadenza = db.Column(db.Boolean, default=False, nullable=False)
    auth_provider = db.Column(db.String(20), default='local')  # local, google, linkedin
    auth_provider_id = db.Column(db.String(255))
    profile_picture = db.Column(db.String(500))

    blogs = db.relationship('Blog', back_populates='author', lazy=True)

    @validates('email')
    def validate_email(self, key, email):
        if not is_permitted_email(email):
            raise ValidationError(f'Email must be a {allowed_email_domain()} address')
        return email.strip().lower()

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash or not password:
            return False
        return check_password_hash(self.password_hash, password)

    def public_profile(self):
        """The user shape returned alongside a token."""
        return {
            'id': self.id,
            'full_name': self.full_name,
            'email': self.email,
            'is_cadenza': self.is_cadenza,
            'is_admin': self.is_admin,
            'profile_picture': self.profile_picture,
        }

    def __repr__(self):
        return f'<User {self.email}>'
