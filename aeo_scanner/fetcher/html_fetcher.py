"""Page fetching with SSRF protection.

Any HTTP status the server answers with is returned as data; only transport
failures and refused targets raise.
"""
from __future__ import annotations

import logging
import socket
from dataclasses import dataclass, field
from ipaddress import ip_address
from urllib.parse import urljoin, urlparse

import requests

from aeo_scanner.config.settings import settings

logger = logging.getLogger(__name__)

# Response headers forwarded to the analysis
FORWARDED_HEADERS = ("x-robots-tag",)


class FetchError(RuntimeError):
    """The page could not be retrieved."""


@dataclass
class FetchedPage:
    """Raw response data consumed by the analysis."""
    html: str
    status_code: int
    final_url: str
    headers: dict[str, str | None] = field(default_factory=dict)


def _is_url(source: str) -> bool:
    parsed = urlparse(source)
    return parsed.scheme in {"http", "https"}


def _validate_ip(ip_str: str) -> tuple[bool, str]:
    """Check if an IP address is safe (not private/internal)."""
    try:
        ip = ip_address(ip_str)
        if ip.is_private or ip.is_loopback or ip.is_reserved or ip.is_link_local:
            return False, f"Access to private/internal IP addresses is forbidden: {ip_str}"
        return True, ""
    except ValueError:
        return False, f"Invalid IP address: {ip_str}"


def _resolve_and_validate_url(url: str) -> str:
    """Resolve the URL's hostname and make sure it is a public address.

    Returns:
        Error message, or an empty string when the URL is safe to fetch
    """
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"}:
        return "Only http and https schemes are allowed"

    hostname = parsed.hostname
    if not hostname:
        return "Invalid URL: hostname not found"

    try:
        resolved_ip = socket.gethostbyname(hostname)
    except socket.gaierror:
        return f"Could not resolve hostname: {hostname}"

    _, error_msg = _validate_ip(resolved_ip)
    return error_msg


def _read_body(response: requests.Response) -> str:
    """Read the response body, enforcing the size limit."""
    max_size = settings.fetcher.max_response_size

    content_length = response.headers.get("Content-Length")
    if content_length and content_length.isdigit() and int(content_length) > max_size:
        response.close()
        raise FetchError(f"Response too large: {int(content_length)} bytes (max {max_size})")

    chunks = []
    total_size = 0
    for chunk in response.iter_content(chunk_size=8192, decode_unicode=False):
        total_size += len(chunk)
        if total_size > max_size:
            response.close()
            raise FetchError(f"Response too large: exceeded {max_size} bytes")
        chunks.append(chunk)

    content_bytes = b"".join(chunks)
    encoding = response.encoding or "utf-8"
    try:
        return content_bytes.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        return content_bytes.decode("utf-8", errors="replace")


def _get(url: str) -> requests.Response:
    try:
        return requests.get(
            url,
            headers={"User-Agent": settings.fetcher.user_agent},
            timeout=settings.fetcher.request_timeout,
            allow_redirects=False,  # each hop is validated below
            stream=True,
        )
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch {url}: {exc}") from exc


def fetch_page(url: str) -> FetchedPage:
    """Fetch a page for analysis.

    Redirects are followed manually, up to the configured limit, and every
    hop is checked against private/internal addresses.

    Raises:
        ValueError: If the URL is not http(s)
        FetchError: On transport failure, SSRF refusal or oversized response
    """
    if not _is_url(url):
        raise ValueError("Only http and https URLs are allowed")

    error_msg = _resolve_and_validate_url(url)
    if error_msg:
        raise FetchError(f"SSRF protection: {error_msg}")

    current_url = url
    response = _get(current_url)

    redirect_count = 0
    while response.is_redirect:
        if redirect_count >= settings.fetcher.max_redirects:
            response.close()
            raise FetchError(f"Too many redirects (max {settings.fetcher.max_redirects})")
        location = response.headers.get("Location", "")
        if not location:
            break
        redirect_count += 1
        redirect_url = urljoin(current_url, location)

        redirect_error = _resolve_and_validate_url(redirect_url)
        if redirect_error:
            response.close()
            raise FetchError(f"SSRF protection: Redirect blocked - {redirect_error}")

        response.close()
        current_url = redirect_url
        response = _get(current_url)

    html = _read_body(response)
    headers = {name: response.headers.get(name) for name in FORWARDED_HEADERS}
    logger.info(
        "Fetched %s -> %s (%d, %d bytes, %d redirects)",
        url,
        current_url,
        response.status_code,
        len(html),
        redirect_count,
    )

    return FetchedPage(
        html=html,
        status_code=response.status_code,
        final_url=current_url,
        headers=headers,
    )
