__all__ = [
    'APIError',
    'APIKeyRequiredError',
    'BunnyStreamError',
    'CDNHostnameRequiredError',
    'CDNTokenKeyRequiredError',
    'Client',
    'Config',
    'DEFAULT_BASE_URL',
    'DEFAULT_MAX_RETRIES',
    'DEFAULT_TIMEOUT',
    'DEFAULT_USER_AGENT',
    'EmbedTokenKeyRequiredError',
    'ForbiddenError',
    'InternalServerError',
    'InvalidConfigError',
    'LibraryIDRequiredError',
    'OutputCodec',
    'PreconditionError',
    'QueryBuilder',
    'RateLimitedError',
    'Resolution',
    'ResolutionRequiredError',
    'Response',
    'ServiceUnavailableError',
    'SignedURLOptions',
    'TitleRequiredError',
    'TransportError',
    'UnauthorizedError',
    'UploadVideoOptions',
    'VideoIDRequiredError',
    'VideoNotFoundError',
    'VideoURLs',
    '__version__',
    'sign_cdn_token',
    'sign_embed_token',
]

from ._client import Client
from ._errors import APIError
from ._errors import APIKeyRequiredError
from ._errors import BunnyStreamError
from ._errors import CDNHostnameRequiredError
from ._errors import CDNTokenKeyRequiredError
from ._errors import EmbedTokenKeyRequiredError
from ._errors import ForbiddenError
from ._errors import InternalServerError
from ._errors import InvalidConfigError
from ._errors import LibraryIDRequiredError
from ._errors import PreconditionError
from ._errors import RateLimitedError
from ._errors import ResolutionRequiredError
from ._errors import ServiceUnavailableError
from ._errors import TitleRequiredError
from ._errors import TransportError
from ._errors import UnauthorizedError
from ._errors import VideoIDRequiredError
from ._errors import VideoNotFoundError
from ._query import QueryBuilder
from ._signer import sign_cdn_token
from ._signer import sign_embed_token
from ._types import Config
from ._types import DEFAULT_BASE_URL
from ._types import DEFAULT_MAX_RETRIES
from ._types import DEFAULT_TIMEOUT
from ._types import DEFAULT_USER_AGENT
from ._types import OutputCodec
from ._types import Resolution
from ._types import Response
from ._types import SignedURLOptions
from ._types import UploadVideoOptions
from ._types import VERSION as __version__
from ._types import VideoURLs
