"""Blog post model."""
from datetime import datetime

from sqlalchemy.orm import validates

from cadenza.errors import ValidationError
from cadenza.extensions import db
from cadenza.models.base import SerializerMixin, TimestampMixin


class Blog(SerializerMixin, TimestampMixin, db.Model):
    __tablename__ = 'blogs'

    SEARCH_FIELDS = ('title', 'summary', 'content', 'category', 'tags')
    WRITABLE_FIELDS = (
        'title', 'content', 'summary', 'image_url', 'author_id', 'category',
        'tags', 'published', 'publish_date', 'pinned',
    )

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)  # HTML
    summary = db.Column(db.Text, nullable=False)
    image_url = db.Column(db.String(500))
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False)
    category = db.Column(db.String(100))
    tags = db.Column(db.String(500))  # Comma separated
    published = db.Column(db.Boolean, default=False, nullable=False)
    publish_date = db.Column(db.DateTime)
    pinned = db.Column(db.Boolean, default=False, nullable=False)

    author = db.relationship('User', back_populates='blogs')

    @validates('publish_date')
    def validate_publish_date(self, key, value):
        if value is None or isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
        except ValueError:
            raise ValidationError(f'Invalid publish_date: {value}')

    def to_dict(self):
        data = super().to_dict()
        if self.author is not None:
            data['author'] = {'id': self.author.id, 'full_name': self.author.full_name}
        return data

    def __repr__(self):
        return f'<Blog {self.title}>'
