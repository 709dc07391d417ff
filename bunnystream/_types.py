__all__ = [
    'Config',
    'DEFAULT_BASE_URL',
    'DEFAULT_MAX_RETRIES',
    'DEFAULT_TIMEOUT',
    'DEFAULT_USER_AGENT',
    'OutputCodec',
    'Resolution',
    'Response',
    'Restrictions',
    'SignedURLOptions',
    'UploadVideoOptions',
    'UploadVideoParams',
    'VERSION',
    'VideoURLs',
]

from collections.abc import Iterable
import logging
from typing import Annotated
from typing import Literal
from typing import override
from typing import TypedDict

import httpx
import pydantic
import pydantic_core
import pydantic_settings

assert __package__

VERSION = '0.1.0'

DEFAULT_BASE_URL = 'https://video.bunnycdn.com'
DEFAULT_MAX_RETRIES = 3
DEFAULT_TIMEOUT = 60.0
DEFAULT_USER_AGENT = f'{__package__}-python/{VERSION}'

Resolution = Literal['240p', '360p', '480p', '720p', '1080p', '1440p', '2160p']
OutputCodec = Literal['x264', 'vp9']


def _join(value: object, /):
    match value:
        case None:
            return ''
        case str():
            return value
        case Iterable():
            return ','.join(map(str, value))
        case _:
            return value


_CommaList = Annotated[str, pydantic.BeforeValidator(_join)]


class Config(pydantic_settings.BaseSettings):
    api_key: pydantic.SecretStr = pydantic.SecretStr('')
    library_id: str = ''
    base_url: str = DEFAULT_BASE_URL
    cdn_hostname: str = ''
    embed_token_key: pydantic.SecretStr = pydantic.SecretStr('')
    cdn_token_key: pydantic.SecretStr = pydantic.SecretStr('')
    user_agent: str = DEFAULT_USER_AGENT
    # Accepted but not consulted: requests are never retried.
    max_retries: int = DEFAULT_MAX_RETRIES
    timeout: float = DEFAULT_TIMEOUT
    http_client: Annotated[
        httpx.Client | None,
        pydantic.Field(exclude=True, repr=False),
    ] = None
    logger: Annotated[
        logging.Logger | None,
        pydantic.Field(exclude=True, repr=False),
    ] = None

    model_config = pydantic_settings.SettingsConfigDict(
        arbitrary_types_allowed=True,
        coerce_numbers_to_str=True,
        env_prefix=f'{__package__}_'.upper(),
        frozen=True,
    )

    @pydantic.field_validator('base_url', mode='after')
    @classmethod
    def _default_base_url(cls, value: str):
        return value.strip().rstrip('/') or DEFAULT_BASE_URL

    @pydantic.field_validator('user_agent', mode='after')
    @classmethod
    def _default_user_agent(cls, value: str):
        return value if value.strip() else DEFAULT_USER_AGENT

    @pydantic.field_validator('max_retries', mode='after')
    @classmethod
    def _default_max_retries(cls, value: int):
        return value if value >= 1 else DEFAULT_MAX_RETRIES

    @pydantic.field_validator('timeout', mode='after')
    @classmethod
    def _default_timeout(cls, value: float):
        return value if value > 0 else DEFAULT_TIMEOUT

    @classmethod
    @override
    def settings_customise_sources(
        cls,
        settings_cls: type[pydantic_settings.BaseSettings],
        init_settings: pydantic_settings.PydanticBaseSettingsSource,
        env_settings: pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: pydantic_settings.PydanticBaseSettingsSource,
    ):
        return init_settings, env_settings


class Response(pydantic.BaseModel):
    status_code: int
    headers: httpx.Headers
    body: bytes = b''

    model_config = pydantic.ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def json_body(self) -> pydantic.JsonValue:
        if not self.body.strip():
            return None
        return pydantic_core.from_json(self.body)


class SignedURLOptions(pydantic.BaseModel):
    """Restrictions baked into a signed CDN URL.

    ``user_ip`` pins the URL to one IPv4 address (Bunny accepts the whole /24).
    Country lists take ISO 3166-1 alpha-2 codes, either comma-separated or as
    a sequence.
    """

    user_ip: str = ''
    countries_allowed: _CommaList = ''
    countries_blocked: _CommaList = ''

    model_config = pydantic.ConfigDict(extra='forbid', frozen=True)


class Restrictions(TypedDict, total=False):
    user_ip: str
    countries_allowed: str | Iterable[str]
    countries_blocked: str | Iterable[str]


class UploadVideoOptions(pydantic.BaseModel):
    jit_enabled: bool | None = None
    enabled_resolutions: tuple[Resolution, ...] = ()
    enabled_output_codecs: tuple[OutputCodec, ...] = ()
    transcribe_enabled: bool | None = None
    transcribe_languages: tuple[str, ...] = ()
    source_language: str = ''
    generate_title: bool | None = None
    generate_description: bool | None = None
    generate_chapters: bool | None = None
    generate_moments: bool | None = None

    model_config = pydantic.ConfigDict(extra='forbid', frozen=True)


class UploadVideoParams(TypedDict, total=False):
    jit_enabled: bool
    enabled_resolutions: Iterable[Resolution]
    enabled_output_codecs: Iterable[OutputCodec]
    transcribe_enabled: bool
    transcribe_languages: Iterable[str]
    source_language: str
    generate_title: bool
    generate_description: bool
    generate_chapters: bool
    generate_moments: bool


class VideoURLs(pydantic.BaseModel):
    embed_url: str
    direct_play_url: str
    hls_playlist_url: str | None = None
    thumbnail_url: str | None = None
    preview_animation_url: str | None = None

    model_config = pydantic.ConfigDict(frozen=True)
