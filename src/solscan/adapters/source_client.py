"""Contract source loading from local files and HTTP URLs."""

import logging
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 10


class SourceClientError(Exception):
    """Base exception for source loading errors."""

    pass


class SourceNotFoundError(SourceClientError):
    """Raised when a source file or URL does not exist."""

    pass


class NetworkError(SourceClientError):
    """Raised when network-related errors occur."""

    pass


def read_source_file(path: str | Path) -> str:
    """
    Read a contract source file as UTF-8 text.

    Raises:
        SourceNotFoundError: If the path does not exist or is not a file
        SourceClientError: If the file cannot be read or decoded
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise SourceNotFoundError(f"Source file does not exist: {path}")
    if not path.is_file():
        raise SourceNotFoundError(f"Source path is not a file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise SourceClientError(f"Source file is not valid UTF-8: {path}: {e}")
    except OSError as e:
        raise SourceClientError(f"Failed to read source file {path}: {e}")


def fetch_source(url: str) -> str:
    """
    Fetch contract source text from a URL.

    Args:
        url: HTTP(S) URL serving raw contract source

    Returns:
        Source text

    Raises:
        SourceNotFoundError: If the URL returns 404
        NetworkError: If the request fails at the transport level
        SourceClientError: For other HTTP errors
    """
    logger.debug("Fetching contract source from %s", url)
    try:
        response = requests.get(url, timeout=REQUEST_TIMEOUT)

        if response.status_code == 404:
            raise SourceNotFoundError(f"Source not found at {url}")

        response.raise_for_status()
        return response.text

    except requests.exceptions.Timeout:
        raise NetworkError(f"Connection to {url} timed out.")
    except requests.exceptions.ConnectionError as e:
        raise NetworkError(f"Unable to connect to {url}: {e}")
    except requests.exceptions.HTTPError as e:
        raise SourceClientError(f"HTTP error while fetching {url}: {e}")
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Network error while fetching {url}: {e}")
