import secrets

# 16 random bytes, 22 url-safe characters
UPDATE_TOKEN_BYTES = 16


def generate_update_token() -> str:
    """Issue a fresh opaque update token for a new RSVP."""
    return secrets.token_urlsafe(UPDATE_TOKEN_BYTES)
