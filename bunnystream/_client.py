__all__ = ('Client',)

from collections.abc import Iterable
import json
import logging
import threading
from typing import Any
from typing import BinaryIO
from typing import Self
from typing import Unpack

import httpx

from . import _signed
from . import _urls
from ._errors import APIKeyRequiredError
from ._errors import error_for_status
from ._errors import LibraryIDRequiredError
from ._errors import TitleRequiredError
from ._errors import TransportError
from ._query import QueryBuilder
from ._types import Config
from ._types import Resolution
from ._types import Response
from ._types import Restrictions
from ._types import SignedURLOptions
from ._types import UploadVideoOptions
from ._types import UploadVideoParams
from ._types import VideoURLs

type Content = bytes | BinaryIO | Iterable[bytes]
type Timeout = float | httpx.Timeout | None


class Client:
    """Bunny Stream API client for one video library.

    Without a config, settings are read from ``BUNNYSTREAM_*`` environment
    variables. The client holds no per-call state and may be shared between
    threads. It owns the underlying ``httpx.Client`` only when it created it.
    """

    def __init__(self, config: Config | None = None, /):
        if config is None:
            config = Config()
        if not config.api_key.get_secret_value().strip():
            raise APIKeyRequiredError()
        if not config.library_id.strip():
            raise LibraryIDRequiredError()
        self._config = config
        self._logger = config.logger or _logger
        self._owns_http = config.http_client is None
        self._http = config.http_client or httpx.Client(timeout=config.timeout)
        self._seen: set[tuple[str, str]] = set()
        self._seen_lock = threading.Lock()

    @property
    def config(self):
        return self._config

    @property
    def library_id(self):
        return self._config.library_id

    @property
    def base_url(self):
        return self._config.base_url

    def close(self):
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object):
        self.close()

    def create_video_object(
        self,
        title: str,
        /,
        *,
        collection_id: str = '',
        thumbnail_time: str = '',
        timeout: Timeout = None,
    ) -> Response:
        """Create an empty video entry in the library.

        The returned body carries the new video's ``guid``, which is what
        :meth:`upload_video` expects.
        """
        if not title.strip():
            raise TitleRequiredError()
        body = {'title': title}
        if collection_id:
            body['collectionId'] = collection_id
        if thumbnail_time:
            body['thumbnailTime'] = thumbnail_time
        request = self._request(
            'POST',
            f'/library/{self.library_id}/videos',
            content=json.dumps(body).encode(),
            content_type='application/json',
            timeout=timeout,
        )
        return self._send(request)

    def upload_video(
        self,
        video_id: str,
        content: Content,
        options: UploadVideoOptions | None = None,
        /,
        *,
        timeout: Timeout = None,
        **params: Unpack[UploadVideoParams],
    ) -> Response:
        """Upload the binary for an existing video object.

        Encoding settings come from ``options`` and/or keyword arguments, the
        latter taking precedence. Unset settings are left out of the query so
        the library defaults apply. File objects and iterables are streamed.
        """
        _urls.require_video_id(video_id)
        if options is None:
            options = UploadVideoOptions.model_validate(params)
        elif params:
            options = UploadVideoOptions.model_validate(
                options.model_dump(exclude_unset=True) | dict(params),
            )
        request = self._request(
            'PUT',
            f'/library/{self.library_id}/videos/{video_id}',
            content=content,
            content_type='application/octet-stream',
            timeout=timeout,
        )
        (
            QueryBuilder(request)
            .set_bool('jitEnabled', options.jit_enabled)
            .set_strings('enabledResolutions', options.enabled_resolutions)
            .set_strings('enabledOutputCodecs', options.enabled_output_codecs)
            .set_bool('transcribeEnabled', options.transcribe_enabled)
            .set_strings('transcribeLanguages', options.transcribe_languages)
            .set_string('sourceLanguage', options.source_language)
            .set_bool('generateTitle', options.generate_title)
            .set_bool('generateDescription', options.generate_description)
            .set_bool('generateChapters', options.generate_chapters)
            .set_bool('generateMoments', options.generate_moments)
            .commit()
        )
        return self._send(request)

    def embed_url(self, video_id: str, /):
        return _urls.embed_url(self._config, video_id)

    def direct_play_url(self, video_id: str, /):
        return _urls.direct_play_url(self._config, video_id)

    def hls_playlist_url(self, video_id: str, /):
        """Adaptive bitrate manifest, for players such as hls.js or AVPlayer."""
        return _urls.hls_playlist_url(self._config, video_id)

    def thumbnail_url(self, video_id: str, /):
        return _urls.thumbnail_url(self._config, video_id)

    def preview_animation_url(self, video_id: str, /):
        return _urls.preview_animation_url(self._config, video_id)

    def mp4_url(self, video_id: str, resolution: Resolution, /):
        """Direct MP4 file; the library needs MP4 fallback enabled at upload."""
        return _urls.mp4_url(self._config, video_id, resolution)

    def video_urls(self, video_id: str, /) -> VideoURLs:
        return _urls.video_urls(self._config, video_id)

    def signed_embed_url(self, video_id: str, ttl: _signed.TTL, /):
        return _signed.signed_embed_url(self._config, video_id, ttl)

    def signed_hls_url(
        self,
        video_id: str,
        ttl: _signed.TTL,
        /,
        options: SignedURLOptions | None = None,
        **restrictions: Unpack[Restrictions],
    ):
        """Playlist URL carrying a directory token for ``/{video_id}/``.

        A file token would only cover the playlist and every segment request
        would be refused, so the token signs the whole directory and sits in
        the path where players carry it over to the segment URLs.
        """
        return _signed.signed_hls_url(
            self._config,
            video_id,
            ttl,
            _signed.restrictions(options, restrictions),
        )

    def signed_mp4_url(
        self,
        video_id: str,
        resolution: Resolution,
        ttl: _signed.TTL,
        /,
        options: SignedURLOptions | None = None,
        **restrictions: Unpack[Restrictions],
    ):
        return _signed.signed_mp4_url(
            self._config,
            video_id,
            resolution,
            ttl,
            _signed.restrictions(options, restrictions),
        )

    def _request(
        self,
        method: str,
        path: str,
        *,
        content: Content | None = None,
        content_type: str = '',
        timeout: Timeout = None,
    ):
        headers = {
            'AccessKey': self._config.api_key.get_secret_value(),
            'User-Agent': self._config.user_agent,
        }
        if content_type:
            headers['Content-Type'] = content_type
        return self._http.build_request(
            method,
            self.base_url + path,
            content=content,
            headers=headers,
            timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else timeout,
        )

    def _send(self, request: httpx.Request, /):
        logger = self._logger
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('%s %s', request.method, request.url)
            host = request.url.host

            def trace(event_name: str, _info: dict[str, Any], /):
                pair = (host, event_name)
                with self._seen_lock:
                    if pair in self._seen:
                        return
                    self._seen.add(pair)
                logger.debug('%s: %s', event_name, host)

            request.extensions['trace'] = trace
        try:
            http_response = self._http.send(request)
        except httpx.TransportError as e:
            raise TransportError(
                f'failed to perform request: {request.method} {request.url}',
            ) from e
        response = Response(
            status_code=http_response.status_code,
            headers=http_response.headers,
            body=http_response.content,
        )
        logger.debug(
            '%s %s -> %d (%d bytes)',
            request.method,
            request.url,
            response.status_code,
            len(response.body),
        )
        if error := error_for_status(response):
            raise error
        return response


_logger = logging.getLogger(__package__)
