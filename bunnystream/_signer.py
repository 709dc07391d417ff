__all__ = ('sign_cdn_token', 'sign_embed_token')

import base64
import hashlib

from ._types import SignedURLOptions


def sign_cdn_token(
    key: str,
    path: str,
    expiry: int,
    options: SignedURLOptions | None = None,
    /,
) -> str:
    """Bunny CDN token authentication (v2) for ``path`` valid until ``expiry``.

    The digest covers key, path, expiry, the optional user IP and the sorted,
    unencoded ``token_countries*`` parameters, concatenated without separators.
    The result is URL-safe base64 with the padding removed.
    """
    options = options or SignedURLOptions()
    extra: dict[str, str] = {}
    if options.countries_allowed:
        extra['token_countries'] = options.countries_allowed
    if options.countries_blocked:
        extra['token_countries_blocked'] = options.countries_blocked
    hashable = key + path + str(expiry)
    if options.user_ip:
        hashable += options.user_ip
    if extra:
        hashable += '&'.join(f'{k}={extra[k]}' for k in sorted(extra))
    digest = hashlib.sha256(hashable.encode()).digest()
    return (
        base64.b64encode(digest).decode()
        .replace('\n', '')
        .replace('+', '-')
        .replace('/', '_')
        .replace('=', '')
    )


def sign_embed_token(key: str, video_id: str, expiry: int, /) -> str:
    # Embed tokens are verified by the iframe player, not the CDN: plain hex.
    return hashlib.sha256(f'{key}{video_id}{expiry}'.encode()).hexdigest()
