"""Google and LinkedIn sign-in: provider registration and profile mapping."""
import logging
from dataclasses import dataclass
from typing import Optional

from cadenza.errors import ValidationError
from cadenza.extensions import db, oauth
from cadenza.models import User

logger = logging.getLogger(__name__)


class OAuthAccountError(Exception):
    """The provider profile cannot be mapped onto a local account."""


@dataclass
class OAuthProfile:
    provider: str
    provider_id: str
    email: Optional[str]
    full_name: Optional[str]
    picture: Optional[str] = None


def register_providers(app):
    oauth.init_app(app)
    oauth.register(
        name='google',
        client_id=app.config.get('GOOGLE_CLIENT_ID'),
        client_secret=app.config.get('GOOGLE_CLIENT_SECRET'),
        access_token_url='https://oauth2.googleapis.com/token',
        authorize_url='https://accounts.google.com/o/oauth2/v2/auth',
        api_base_url='https://www.googleapis.com/oauth2/v3/',
        userinfo_endpoint='https://www.googleapis.com/oauth2/v3/userinfo',
        client_kwargs={'scope': 'email profile'},
    )
    oauth.register(
        name='linkedin',
        client_id=app.config.get('LINKEDIN_CLIENT_ID'),
        client_secret=app.config.get('LINKEDIN_CLIENT_SECRET'),
        access_token_url='https://www.linkedin.com/oauth/v2/accessToken',
        authorize_url='https://www.linkedin.com/oauth/v2/authorization',
        api_base_url='https://api.linkedin.com/v2/',
        userinfo_endpoint='https://api.linkedin.com/v2/userinfo',
        jwks_uri='https://www.linkedin.com/oauth/openid/jwks',
        issuer='https://www.linkedin.com/oauth',
        client_kwargs={
            'scope': 'openid profile email',
            'token_endpoint_auth_method': 'client_secret_post',
        },
    )


def profile_from_userinfo(provider, info):
    """Both providers answer with OpenID Connect userinfo claims."""
    full_name = info.get('name')
    if not full_name:
        full_name = ' '.join(part for part in (info.get('given_name'), info.get('family_name')) if part)
    email = info.get('email')
    if not full_name and email:
        full_name = email.split('@')[0]
    return OAuthProfile(
        provider=provider,
        provider_id=str(info.get('sub') or info.get('id') or ''),
        email=email.strip().lower() if email else None,
        full_name=full_name or None,
        picture=info.get('picture'),
    )


def fetch_profile(provider):
    """Finish the authorization-code exchange for the current callback request."""
    client = oauth.create_client(provider)
    token = client.authorize_access_token()
    info = token.get('userinfo') or client.userinfo(token=token)
    return profile_from_userinfo(provider, info)


def upsert_oauth_user(profile):
    """
    Find the local user for `profile`, creating it on first sign-in.

    Accounts are keyed by (provider, email). An email already registered
    through another provider is refused rather than merged.
    """
    if not profile.email:
        raise OAuthAccountError(f'No email found in {profile.provider} profile')

    user = User.query.filter_by(email=profile.email, auth_provider=profile.provider).first()
    if user is None:
        if User.query.filter_by(email=profile.email).first() is not None:
            raise OAuthAccountError(f'{profile.email} is registered with another sign-in method')
        try:
            user = User(
                full_name=profile.full_name or profile.email,
                email=profile.email,
                auth_provider=profile.provider,
                auth_provider_id=profile.provider_id,
                profile_picture=profile.picture,
            )
        except ValidationError as exc:
            raise OAuthAccountError(str(exc)) from exc
        db.session.add(user)
        logger.info("Created %s account for %s", profile.provider, profile.email)
    else:
        if profile.picture and user.profile_picture != profile.picture:
            user.profile_picture = profile.picture
        if not user.auth_provider_id:
            user.auth_provider_id = profile.provider_id

    db.session.commit()
    return user
