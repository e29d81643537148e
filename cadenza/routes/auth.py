"""Authentication routes: local credentials and OAuth sign-in."""
import logging
from urllib.parse import urlencode

from flask import Blueprint, abort, current_app, jsonify, redirect, request
from flask_babel import gettext as _

from cadenza.auth.oauth import OAuthAccountError, fetch_profile, upsert_oauth_user
from cadenza.auth.tokens import TokenError, create_access_token, decode_access_token
from cadenza.errors import json_object
from cadenza.extensions import oauth
from cadenza.models import db, User
from cadenza.models.user import allowed_email_domain, is_permitted_email

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')
logger = logging.getLogger(__name__)


def token_response(user, status_code=200):
    body = {'token': create_access_token(user.id), 'user': user.public_profile()}
    return jsonify(body), status_code


def frontend_redirect(path, **params):
    return redirect(f"{current_app.config['FRONTEND_URL']}{path}?{urlencode(params)}")


def text_field(data, field):
    """`data[field]` as a string; missing is empty, any other JSON type is a 400."""
    value = data.get(field)
    if value is None:
        return ''
    if not isinstance(value, str):
        abort(400, description=_('%(field)s must be a string', field=field))
    return value


# ==================== Local credentials ====================

@auth_bp.route('/register', methods=['POST'])
def register():
    data = json_object()
    full_name = text_field(data, 'full_name').strip()
    email = text_field(data, 'email').strip().lower()
    password = text_field(data, 'password')

    error = None
    if not full_name or not email or not password:
        error = _('All fields are required')
    elif not is_permitted_email(email):
        error = _('Only %(domain)s addresses are allowed', domain=allowed_email_domain())
    elif User.query.filter_by(email=email).first() is not None:
        error = _('User already exists')

    if error is not None:
        abort(400, description=error)

    user = User(full_name=full_name, email=email, auth_provider='local', is_admin=False, is_cadenza=False)
    user.set_password(password)
    db.session.add(user)
    db.session.commit()
    logger.info("Registered user %s", user.id)
    return token_response(user, 201)


@auth_bp.route('/login', methods=['POST'])
def login():
    data = json_object()
    email = text_field(data, 'email').strip().lower()
    password = text_field(data, 'password')

    if not email or not password:
        abort(400, description=_('Email and password are required'))

    user = User.query.filter_by(email=email).first()
    # OAuth-only accounts have no password hash, so check_password is False
    if user is None or not user.check_password(password):
        abort(401, description=_('Invalid email or password'))

    return token_response(user)


@auth_bp.route('/login-success', methods=['GET'])
def login_success():
    """Exchange the token handed to the frontend after OAuth for the user profile."""
    token = request.args.get('token')
    if not token:
        abort(400, description=_('No token provided'))

    try:
        user_id = decode_access_token(token)
    except TokenError:
        abort(401, description=_('Invalid token'))

    user = db.session.get(User, user_id)
    if user is None:
        abort(404, description=_('User not found'))

    return jsonify({'token': token, 'user': user.public_profile()})


# ==================== OAuth ====================

def _callback_url(provider):
    return current_app.config[f'{provider.upper()}_CALLBACK_URL']


@auth_bp.route('/<any(google, linkedin):provider>', methods=['GET'])
def oauth_begin(provider):
    client = oauth.create_client(provider)
    return client.authorize_redirect(_callback_url(provider))


@auth_bp.route('/<any(google, linkedin):provider>/callback', methods=['GET'])
def oauth_callback(provider):
    try:
        profile = fetch_profile(provider)
        user = upsert_oauth_user(profile)
    except OAuthAccountError as exc:
        db.session.rollback()
        logger.warning("%s sign-in refused: %s", provider, exc)
        return frontend_redirect('/login', error=f'{provider}_auth_failed')
    except Exception:
        db.session.rollback()
        logger.exception("%s sign-in failed", provider)
        return frontend_redirect('/login', error=f'{provider}_auth_failed')

    return frontend_redirect('/login-success', token=create_access_token(user.id))
