"""Load an API description from bytes, a local file, or a URL.

JSON documents are parsed as YAML, which accepts them as-is, so one parser
covers both formats.
"""

import json
import logging
from pathlib import Path

import requests
import yaml

from api_picker.config import REQUEST_TIMEOUT, USER_AGENT

from .detect import detect_version

logger = logging.getLogger(__name__)


class DocumentLoadError(Exception):
    """The source could not be read or is not a JSON/YAML mapping."""


def load_document(data: bytes | str, source: str = "<input>") -> dict:
    """Parse raw document content into a dict."""
    if isinstance(data, bytes):
        data = data.decode("utf-8-sig")

    try:
        doc = yaml.safe_load(data)
    except yaml.YAMLError as e:
        # Tab-indented JSON is valid JSON but not valid YAML
        try:
            doc = json.loads(data)
        except ValueError:
            raise DocumentLoadError(f"Cannot parse {source}: {e}") from e

    if not isinstance(doc, dict):
        raise DocumentLoadError(f"{source} is not an OpenAPI/Swagger document (expected a mapping)")

    if detect_version(doc) is None:
        logger.warning("%s has no 'openapi' or 'swagger' version marker", source)
    return doc


def load_file(file_path: Path) -> dict:
    logger.debug("Reading %s", file_path)
    try:
        data = Path(file_path).read_bytes()
    except OSError as e:
        raise DocumentLoadError(f"Cannot read {file_path}: {e}") from e
    return load_document(data, source=str(file_path))


def load_url(url: str, timeout: float | None = None) -> dict:
    logger.debug("Fetching %s", url)
    try:
        response = requests.get(
            url,
            timeout=timeout or REQUEST_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise DocumentLoadError(f"Cannot fetch {url}: {e}") from e
    return load_document(response.content, source=url)


def load_source(source: str, timeout: float | None = None) -> dict:
    """Load from a URL if ``source`` looks like one, else from a file path."""
    if source.lower().startswith(("http://", "https://")):
        return load_url(source, timeout=timeout)
    return load_file(Path(source))
