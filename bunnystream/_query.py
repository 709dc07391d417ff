__all__ = ('QueryBuilder',)

from collections.abc import Iterable
from typing import Self

import httpx


class QueryBuilder:
    """Collects optional query parameters for a request.

    Absent values are skipped rather than sent empty. The request is left
    untouched until :meth:`commit`::

        QueryBuilder(request).set_bool('jitEnabled', True).commit()
    """

    def __init__(self, request: httpx.Request, /):
        self._request = request
        self._params = request.url.params

    def set_bool(self, key: str, value: bool | None, /) -> Self:
        if value is not None:
            self._params = self._params.set(key, 'true' if value else 'false')
        return self

    def set_string(self, key: str, value: str | None, /) -> Self:
        if value and value.strip():
            self._params = self._params.set(key, value)
        return self

    def set_strings(self, key: str, values: Iterable[str] | None, /) -> Self:
        values = list(values or ())
        if values:
            self._params = self._params.set(key, ','.join(values))
        return self

    def commit(self):
        self._request.url = self._request.url.copy_with(params=self._params)
        return self._request
