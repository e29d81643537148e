"""Blog routes - public reading, admin publishing."""
import logging
from datetime import datetime

from flask import Blueprint, abort, g, jsonify, request
from flask_babel import gettext as _
from sqlalchemy import func

from cadenza.auth import admin_required
from cadenza.models import db, Blog, User
from cadenza.services.listing import apply_search, paginated_response

blogs_bp = Blueprint('blogs', __name__, url_prefix='/api/blogs')
logger = logging.getLogger(__name__)


def _ordered(query):
    return query.order_by(
        Blog.pinned.desc(),
        Blog.publish_date.desc().nulls_last(),
        Blog.created_at.desc(),
        Blog.id.desc(),
    )


def _published():
    return Blog.query.filter(Blog.published.is_(True))


def _stamp_publish_date(blog):
    if blog.published and blog.publish_date is None:
        blog.publish_date = datetime.utcnow()


# ========================================
# PUBLIC
# ========================================

@blogs_bp.route('', methods=['GET'])
def list_blogs():
    """Published posts, pinned first."""
    query = apply_search(_published(), Blog, request.args.get('search'))
    return jsonify(paginated_response(_ordered(query)))


@blogs_bp.route('/pinned', methods=['GET'])
def pinned_blogs():
    blogs = _ordered(_published().filter(Blog.pinned.is_(True))).all()
    return jsonify({'success': True, 'data': [blog.to_dict() for blog in blogs]})


@blogs_bp.route('/category/<category>', methods=['GET'])
def blogs_by_category(category):
    query = _published().filter(func.lower(Blog.category) == category.strip().lower())
    return jsonify(paginated_response(_ordered(query)))


@blogs_bp.route('/<int:blog_id>', methods=['GET'])
def get_blog(blog_id):
    blog = db.get_or_404(Blog, blog_id, description=_('Blog post not found'))
    return jsonify({'success': True, 'data': blog.to_dict()})


# ========================================
# ADMIN
# ========================================

@blogs_bp.route('/admin/all', methods=['GET'])
@admin_required
def list_all_blogs():
    """Every post, drafts included."""
    query = apply_search(Blog.query, Blog, request.args.get('search'))
    return jsonify(paginated_response(_ordered(query)))


@blogs_bp.route('', methods=['POST'])
@admin_required
def create_blog():
    fields = Blog.writable(request.get_json(silent=True))
    fields.setdefault('author_id', g.current_user.id)
    if db.session.get(User, fields['author_id']) is None:
        abort(400, description=_('Author not found'))

    blog = Blog(**fields)
    _stamp_publish_date(blog)
    db.session.add(blog)
    db.session.commit()
    logger.info("User %s created blog %s", g.current_user.id, blog.id)
    return jsonify({'success': True, 'data': blog.to_dict()}), 201


@blogs_bp.route('/<int:blog_id>', methods=['PUT'])
@admin_required
def update_blog(blog_id):
    blog = db.get_or_404(Blog, blog_id, description=_('Blog post not found'))
    fields = Blog.writable(request.get_json(silent=True))
    if 'author_id' in fields and db.session.get(User, fields['author_id']) is None:
        abort(400, description=_('Author not found'))

    blog.apply(fields)
    _stamp_publish_date(blog)
    db.session.commit()
    return jsonify({'success': True, 'data': blog.to_dict()})


@blogs_bp.route('/<int:blog_id>/pin', methods=['PUT'])
@admin_required
def toggle_pinned(blog_id):
    blog = db.get_or_404(Blog, blog_id, description=_('Blog post not found'))
    blog.pinned = not blog.pinned
    db.session.commit()
    logger.info("Blog %s pinned=%s", blog.id, blog.pinned)
    return jsonify({'success': True, 'data': blog.to_dict()})


@blogs_bp.route('/<int:blog_id>', methods=['DELETE'])
@admin_required
def delete_blog(blog_id):
    blog = db.get_or_404(Blog, blog_id, description=_('Blog post not found'))
    db.session.delete(blog)
    db.session.commit()
    logger.info("User %s deleted blog %s", g.current_user.id, blog_id)
    return jsonify({'success': True, 'message': _('Blog post deleted successfully')})
