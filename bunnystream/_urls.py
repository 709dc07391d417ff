__all__ = [
    'cdn_base',
    'cdn_host',
    'direct_play_url',
    'embed_url',
    'hls_playlist_url',
    'mp4_url',
    'preview_animation_url',
    'require_video_id',
    'thumbnail_url',
    'video_urls',
]

from ._errors import CDNHostnameRequiredError
from ._errors import ResolutionRequiredError
from ._errors import VideoIDRequiredError
from ._types import Config
from ._types import Resolution
from ._types import VideoURLs

EMBED_HOST = 'iframe.mediadelivery.net'
PLAY_HOST = 'video.bunnycdn.com'


def require_video_id(video_id: str, /):
    if not video_id.strip():
        raise VideoIDRequiredError()


def cdn_host(config: Config, /):
    if not config.cdn_hostname:
        raise CDNHostnameRequiredError()
    return config.cdn_hostname.rstrip('/')


def cdn_base(config: Config, video_id: str, /):
    return f'https://{cdn_host(config)}/{video_id}'


def embed_url(config: Config, video_id: str, /):
    require_video_id(video_id)
    return f'https://{EMBED_HOST}/embed/{config.library_id}/{video_id}'


def direct_play_url(config: Config, video_id: str, /):
    require_video_id(video_id)
    return f'https://{PLAY_HOST}/play/{config.library_id}/{video_id}'


def hls_playlist_url(config: Config, video_id: str, /):
    require_video_id(video_id)
    return f'{cdn_base(config, video_id)}/playlist.m3u8'


def thumbnail_url(config: Config, video_id: str, /):
    require_video_id(video_id)
    return f'{cdn_base(config, video_id)}/thumbnail.jpg'


def preview_animation_url(config: Config, video_id: str, /):
    require_video_id(video_id)
    return f'{cdn_base(config, video_id)}/preview.webp'


def mp4_url(config: Config, video_id: str, resolution: Resolution, /):
    require_video_id(video_id)
    if not resolution:
        raise ResolutionRequiredError()
    return f'{cdn_base(config, video_id)}/play_{resolution}.mp4'


def video_urls(config: Config, video_id: str, /):
    urls = VideoURLs(
        embed_url=embed_url(config, video_id),
        direct_play_url=direct_play_url(config, video_id),
    )
    if not config.cdn_hostname:
        return urls
    return urls.model_copy(
        update={
            'hls_playlist_url': hls_playlist_url(config, video_id),
            'thumbnail_url': thumbnail_url(config, video_id),
            'preview_animation_url': preview_animation_url(config, video_id),
        },
    )
