"""User routes - own profile and admin user management."""
import logging

from flask import Blueprint, abort, g, jsonify, request
from flask_babel import gettext as _

from cadenza.auth import admin_required, token_required
from cadenza.errors import json_object
from cadenza.models import db, User
from cadenza.services.listing import apply_search, paginated_response

users_bp = Blueprint('users', __name__, url_prefix='/api/users')
logger = logging.getLogger(__name__)

USER_SEARCH_FIELDS = ('full_name', 'email')


def _get_user_or_404(user_id):
    return db.get_or_404(User, user_id, description=_('User not found'))


def _require_bool(data, field):
    value = data.get(field)
    if not isinstance(value, bool):
        abort(400, description=_('%(field)s must be a boolean value', field=field))
    return value


def _guard_self_demotion(user, data):
    if user.id == g.current_user.id and data.get('is_admin') is False:
        abort(400, description=_('You cannot remove your own admin status'))


def _set_password(user, data):
    password = data.get('password')
    if password is None or password == '':
        return
    if not isinstance(password, str):
        abort(400, description=_('password must be a string'))
    user.set_password(password)


def _guard_email_taken(email, user_id=None):
    if not isinstance(email, str):
        abort(400, description=_('email must be a string'))
    existing = User.query.filter(User.email == email.strip().lower()).first()
    if existing is not None and existing.id != user_id:
        abort(400, description=_('User already exists'))


# ==================== Current user ====================

@users_bp.route('/me', methods=['GET'])
@token_required
def get_profile():
    return jsonify(g.current_user.public_profile())


# ==================== Admin ====================

@users_bp.route('/all', methods=['GET'])
@admin_required
def get_all_users():
    """Plain list of every user, for the admin panel."""
    users = User.query.order_by(User.created_at.desc(), User.id.desc()).all()
    return jsonify([user.to_dict() for user in users])


@users_bp.route('/<int:user_id>/admin-status', methods=['PUT'])
@admin_required
def update_admin_status(user_id):
    data = json_object()
    is_admin = _require_bool(data, 'is_admin')
    user = _get_user_or_404(user_id)
    _guard_self_demotion(user, data)

    user.is_admin = is_admin
    db.session.commit()
    logger.info("User %s set is_admin=%s on user %s", g.current_user.id, is_admin, user.id)
    return jsonify(user.public_profile())


@users_bp.route('/<int:user_id>/cadenza-status', methods=['PUT'])
@admin_required
def update_cadenza_status(user_id):
    data = json_object()
    is_cadenza = _require_bool(data, 'is_cadenza')
    user = _get_user_or_404(user_id)

    user.is_cadenza = is_cadenza
    db.session.commit()
    logger.info("User %s set is_cadenza=%s on user %s", g.current_user.id, is_cadenza, user.id)
    return jsonify(user.public_profile())


@users_bp.route('', methods=['GET'])
@admin_required
def list_users():
    query = apply_search(User.query, User, request.args.get('search'), USER_SEARCH_FIELDS)
    return jsonify(paginated_response(query.order_by(User.full_name.asc(), User.id.asc())))


@users_bp.route('/<int:user_id>', methods=['GET'])
@admin_required
def get_user(user_id):
    return jsonify({'success': True, 'data': _get_user_or_404(user_id).to_dict()})


@users_bp.route('', methods=['POST'])
@admin_required
def create_user():
    """Create a user from the admin panel. Password is optional."""
    data = json_object()
    if not data.get('full_name') or not data.get('email'):
        abort(400, description=_('Full name and email are required'))
    _guard_email_taken(data['email'])

    user = User(**User.writable(data))
    user.auth_provider = 'local'
    _set_password(user, data)
    db.session.add(user)
    db.session.commit()
    logger.info("User %s created user %s", g.current_user.id, user.id)
    return jsonify({'success': True, 'data': user.to_dict()}), 201


@users_bp.route('/<int:user_id>', methods=['PUT'])
@admin_required
def update_user(user_id):
    user = _get_user_or_404(user_id)
    data = json_object()
    _guard_self_demotion(user, data)
    if 'email' in data:
        _guard_email_taken(data['email'], user.id)

    _set_password(user, data)
    user.apply(data)
    db.session.commit()
    return jsonify({'success': True, 'data': user.to_dict()})


@users_bp.route('/<int:user_id>', methods=['DELETE'])
@admin_required
def delete_user(user_id):
    user = _get_user_or_404(user_id)

    if user.id == g.current_user.id:
        abort(400, description=_('You cannot delete yourself'))
    if user.blogs:
        abort(400, description=_('User still authors blog posts'))

    email = user.email
    db.session.delete(user)
    db.session.commit()
    logger.info("User %s deleted user %s (%s)", g.current_user.id, user_id, email)
    return jsonify({'success': True, 'message': _('User deleted successfully')})
