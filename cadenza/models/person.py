"""Person model."""
from cadenza.extensions import db
from cadenza.models.base import SerializerMixin, TimestampMixin


class Person(SerializerMixin, TimestampMixin, db.Model):
    __tablename__ = 'people'

    SEARCH_FIELDS = ('name', 'description', 'category', 'location', 'company', 'position')
    WRITABLE_FIELDS = (
        'name', 'avatar_url', 'category', 'location', 'description', 'verified',
        'company', 'position', 'email', 'linkedin', 'twitter', 'education',
        'experience', 'skills', 'achievements', 'notes',
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    avatar_url = db.Column(db.String(500))
    category = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    verified = db.Column(db.Boolean, default=False, nullable=False)

    # Free text, not a link to the companies table
    company = db.Column(db.String(255))
    position = db.Column(db.String(255))

    # Contact
    email = db.Column(db.String(255))
    linkedin = db.Column(db.String(500))
    twitter = db.Column(db.String(255))

    education = db.Column(db.Text)
    experience = db.Column(db.Text)
    skills = db.Column(db.Text)
    achievements = db.Column(db.Text)
    notes = db.Column(db.Text)

    def __repr__(self):
        return f'<Person {self.name}>'
