__all__ = [
    'APIError',
    'APIKeyRequiredError',
    'BunnyStreamError',
    'CDNHostnameRequiredError',
    'CDNTokenKeyRequiredError',
    'EmbedTokenKeyRequiredError',
    'ForbiddenError',
    'InternalServerError',
    'InvalidConfigError',
    'LibraryIDRequiredError',
    'PreconditionError',
    'RateLimitedError',
    'ResolutionRequiredError',
    'ServiceUnavailableError',
    'TitleRequiredError',
    'TransportError',
    'UnauthorizedError',
    'VideoIDRequiredError',
    'VideoNotFoundError',
    'error_for_status',
]

from typing import override
from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from ._types import Response

_MESSAGE_LIMIT = 200


class BunnyStreamError(Exception):
    pass


class InvalidConfigError(BunnyStreamError, ValueError):
    default_message = 'invalid config'

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class APIKeyRequiredError(InvalidConfigError):
    default_message = 'invalid config: api key required'


class LibraryIDRequiredError(InvalidConfigError):
    default_message = 'invalid config: library id required'


class PreconditionError(BunnyStreamError, ValueError):
    default_message = ''

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class TitleRequiredError(PreconditionError):
    default_message = 'title is required'


class VideoIDRequiredError(PreconditionError):
    default_message = 'video id is required'


class ResolutionRequiredError(PreconditionError):
    default_message = 'resolution is required'


class CDNHostnameRequiredError(PreconditionError):
    default_message = 'cdn hostname required, set cdn_hostname in Config'


class EmbedTokenKeyRequiredError(PreconditionError):
    default_message = 'embed token key required, set embed_token_key in Config'


class CDNTokenKeyRequiredError(PreconditionError):
    default_message = 'cdn token key required, set cdn_token_key in Config'


class TransportError(BunnyStreamError):
    pass


class APIError(BunnyStreamError):
    """Non-success response from the Bunny Stream API.

    ``message`` is the response body, cut to 200 bytes. The well-known status
    codes raise one of the subclasses below instead, so ``except APIError``
    covers every protocol failure.
    """

    default_message = ''

    def __init__(
        self,
        status_code: int,
        message: str = '',
        body: str = '',
        response: 'Response | None' = None,
    ):
        self.status_code = status_code
        self.message = message
        self.body = body
        self.response = response
        super().__init__(status_code, message)

    @override
    def __str__(self):
        if self.message:
            return f'bunny stream api error (status {self.status_code}): {self.message}'
        return f'bunny stream api error (status {self.status_code})'

    @classmethod
    def from_response(cls, response: 'Response', /):
        return cls(
            response.status_code,
            _truncate(response.body),
            response.body.decode('utf-8', 'replace'),
            response,
        )


class UnauthorizedError(APIError):
    default_message = 'unauthorized - check your API key'


class ForbiddenError(APIError):
    default_message = 'forbidden'


class VideoNotFoundError(APIError):
    default_message = 'video not found'


class RateLimitedError(APIError):
    default_message = 'rate limited - too many requests'


class InternalServerError(APIError):
    default_message = 'internal server error'


class ServiceUnavailableError(APIError):
    default_message = 'service unavailable'


_SENTINELS: dict[int, type[APIError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: VideoNotFoundError,
    429: RateLimitedError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def error_for_status(response: 'Response', /) -> APIError | None:
    match response.status_code:
        case 200 | 201 | 202 | 204:
            return None
        case 400:
            return APIError.from_response(response)
        case code if cls := _SENTINELS.get(code):
            return cls(
                code,
                cls.default_message,
                response.body.decode('utf-8', 'replace'),
                response,
            )
        case _:
            return APIError.from_response(response)


def _truncate(body: bytes, /):
    if len(body) > _MESSAGE_LIMIT:
        # a character split by the cut decodes to one trailing U+FFFD
        text = body[:_MESSAGE_LIMIT].decode('utf-8', 'replace')
        return text.removesuffix('\ufffd') + '...'
    return body.decode('utf-8', 'replace')
