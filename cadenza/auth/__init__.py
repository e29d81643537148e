"""Authentication: bearer tokens, route guards and OAuth sign-in."""
from cadenza.auth.decorators import admin_required, token_required
from cadenza.auth.tokens import create_access_token, decode_access_token

__all__ = ['admin_required', 'token_required', 'create_access_token', 'decode_access_token']
