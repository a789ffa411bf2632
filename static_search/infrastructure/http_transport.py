"""HTTP transport abstraction used to fetch the search index.

Provides a simple interface with a `get` method. The default implementation
uses curl-cffi; `FileTransport` serves a locally built site directory so the
matcher can run against build output without a web server.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Union
from urllib.parse import unquote, urlparse

from curl_cffi import requests as curl_requests


@dataclass
class TransportResponse:
    """Minimal Response-like object returned by non-network transports."""
    status_code: int
    content: bytes


class HTTPTransport:
    """Abstract transport interface. Concrete transports implement `get`
    returning an object with `status_code` and `content`.
    """

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, follow_redirects: bool = True, timeout: float = 30.0):
        raise NotImplementedError()


class CurlTransport(HTTPTransport):
    """curl-cffi based transport that impersonates Chrome."""

    def _filter_headers(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Remove headers that conflict with impersonation (curl-cffi sets these automatically)."""
        skip_keys = {'user-agent', 'accept-encoding', 'accept-language'}
        return {k: v for k, v in headers.items() if k.lower() not in skip_keys}

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, follow_redirects: bool = True, timeout: float = 30.0):
        return curl_requests.get(
            url,
            headers=self._filter_headers(headers or {}),
            impersonate="chrome",
            timeout=timeout,
            allow_redirects=follow_redirects
        )


class FileTransport(HTTPTransport):
    """Serves URL paths from a site output directory.

    Only the path component of the URL is used; it is looked up relative to
    `site_dir`. Missing files answer 404, paths escaping the root answer 403.
    """

    def __init__(self, site_dir: Union[str, Path]):
        self.site_dir = Path(site_dir).resolve()

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, follow_redirects: bool = True, timeout: float = 30.0):
        path = unquote(urlparse(url).path).lstrip('/')
        target = (self.site_dir / path).resolve()
        if target != self.site_dir and self.site_dir not in target.parents:
            return TransportResponse(status_code=403, content=b'')
        if target.is_dir():
            target = target / 'index.html'
        if not target.is_file():
            return TransportResponse(status_code=404, content=b'')
        return TransportResponse(status_code=200, content=target.read_bytes())


__all__ = ["HTTPTransport", "CurlTransport", "FileTransport", "TransportResponse"]
