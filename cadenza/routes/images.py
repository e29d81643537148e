"""Image routes - redirect to a record's stored image, or a placeholder."""
from flask import Blueprint, redirect

from cadenza.models import db, Blog, Company, Person

images_bp = Blueprint('images', __name__, url_prefix='/api/images')

PLACEHOLDERS = {
    'blog': '/images/blog_thumb/b1.png',
    'person': '/images/users_img/u1.png',
    'company': '/images/company_img/c1.png',
}


def _image_redirect(model, field, kind, record_id):
    record = db.session.get(model, record_id)
    url = getattr(record, field, None) if record is not None else None
    return redirect(url or PLACEHOLDERS[kind])


@images_bp.route('/blog/<int:blog_id>')
def blog_image(blog_id):
    return _image_redirect(Blog, 'image_url', 'blog', blog_id)


@images_bp.route('/person/<int:person_id>')
def person_image(person_id):
    return _image_redirect(Person, 'avatar_url', 'person', person_id)


@images_bp.route('/company/<int:company_id>')
def company_image(company_id):
    return _image_redirect(Company, 'logo_url', 'company', company_id)
