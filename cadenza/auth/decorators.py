"""Bearer-token and admin decorators for API routes."""
import logging
from functools import wraps

from flask import abort, g, request
from flask_babel import gettext as _

from cadenza.auth.tokens import TokenError, decode_access_token
from cadenza.extensions import db
from cadenza.models import User

logger = logging.getLogger(__name__)


def bearer_token():
    """Token from `Authorization: Bearer <token>`, or None."""
    header = request.headers.get('Authorization', '')
    scheme, _sep, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def token_required(f):
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = bearer_token()
        if token is None:
            abort(401, description=_('No token provided'))

        try:
            user_id = decode_access_token(token)
        except TokenError as exc:
            logger.info("Token verification failed: %s", exc)
            abort(403, description=_('Invalid or expired token'))

        user = db.session.get(User, user_id)
        if user is None:
            abort(404, description=_('User not found'))

        g.current_user = user
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    @wraps(f)
    @token_required
    def decorated_function(*args, **kwargs):
        if not g.current_user.is_admin:
            abort(403, description=_('Admin access required'))
        return f(*args, **kwargs)
    return decorated_function
