__all__ = [
    'expiry_after',
    'restrictions',
    'signed_embed_url',
    'signed_hls_url',
    'signed_mp4_url',
]

import datetime
import time
import urllib.parse

from ._errors import CDNTokenKeyRequiredError
from ._errors import EmbedTokenKeyRequiredError
from ._errors import ResolutionRequiredError
from ._signer import sign_cdn_token
from ._signer import sign_embed_token
from ._types import Config
from ._types import Resolution
from ._types import Restrictions
from ._types import SignedURLOptions
from ._urls import cdn_host
from ._urls import embed_url
from ._urls import require_video_id

type TTL = float | datetime.timedelta


def expiry_after(ttl: TTL, /) -> int:
    if isinstance(ttl, datetime.timedelta):
        ttl = ttl.total_seconds()
    return int(time.time() + ttl)


def restrictions(
    options: SignedURLOptions | None,
    overrides: Restrictions,
    /,
) -> SignedURLOptions:
    if options is None:
        return SignedURLOptions.model_validate(overrides)
    return SignedURLOptions.model_validate(
        options.model_dump(exclude_unset=True) | dict(overrides),
    )


def signed_embed_url(config: Config, video_id: str, ttl: TTL, /):
    require_video_id(video_id)
    key = config.embed_token_key.get_secret_value()
    if not key:
        raise EmbedTokenKeyRequiredError()
    expiry = expiry_after(ttl)
    token = sign_embed_token(key, video_id, expiry)
    return f'{embed_url(config, video_id)}?token={token}&expires={expiry}'


def signed_hls_url(
    config: Config,
    video_id: str,
    ttl: TTL,
    options: SignedURLOptions,
    /,
):
    require_video_id(video_id)
    host = cdn_host(config)
    key = _cdn_token_key(config)
    # The directory token covers every segment under /{video_id}/, and sitting
    # in the path it is carried over to the relative segment requests.
    dir_path = f'/{video_id}/'
    expiry = expiry_after(ttl)
    token = sign_cdn_token(key, dir_path, expiry, options)
    return (
        f'https://{host}/bcdn_token={token}&expires={expiry}'
        f'&token_path={urllib.parse.quote_plus(dir_path)}'
        f'/{video_id}/playlist.m3u8'
    )


def signed_mp4_url(
    config: Config,
    video_id: str,
    resolution: Resolution,
    ttl: TTL,
    options: SignedURLOptions,
    /,
):
    require_video_id(video_id)
    if not resolution:
        raise ResolutionRequiredError()
    host = cdn_host(config)
    key = _cdn_token_key(config)
    file_path = f'/{video_id}/play_{resolution}.mp4'
    expiry = expiry_after(ttl)
    params = {
        'token': sign_cdn_token(key, file_path, expiry, options),
        'expires': str(expiry),
    }
    if options.countries_allowed:
        params['token_countries'] = options.countries_allowed
    if options.countries_blocked:
        params['token_countries_blocked'] = options.countries_blocked
    query = urllib.parse.urlencode(sorted(params.items()))
    return f'https://{host}{file_path}?{query}'


def _cdn_token_key(config: Config, /):
    if key := config.cdn_token_key.get_secret_value():
        return key
    raise CDNTokenKeyRequiredError()
