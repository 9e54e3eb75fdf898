"""Gist publishing pipeline.

The CLI delegates every stage to these helpers, which keeps side effects
(printing, exit codes) out of the core logic:

1. `resolve_token`
2. `collect_files`
3. `build_payload` / `encode_payload`
4. `build_request` + `adapters.gist_api.send_gist_request`

Each stage raises a `core.errors.GistError` subclass instead of exiting.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Sequence

import httpx
from pydantic_core import PydanticSerializationError

from adapters.gist_api import send_gist_request
from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import (
    GistFile,
    GistOptions,
    GistPayload,
    GistRequest,
    PublishResult,
    TokenSources,
)
from core.errors import ConfigurationError, EncodingError, InputError

logger = logging.getLogger(__name__)


def token_sources_from_settings(explicit: str | None, settings: AppSettings) -> TokenSources:
    return TokenSources(
        explicit=explicit,
        gist_token=settings.gist_token,
        github_token=settings.github_token,
    )


def resolve_token(sources: TokenSources) -> str:
    """Return the first non-empty token: explicit, GIST_TOKEN, GITHUB_TOKEN."""

    for candidate in (sources.explicit, sources.gist_token, sources.github_token):
        if candidate:
            return candidate
    raise ConfigurationError("no token")


def _decode(raw: bytes) -> str:
    # Invalid UTF-8 is replaced rather than rejected.
    return raw.decode("utf-8", errors="replace")


def collect_files(
    paths: Sequence[str | Path],
    *,
    stdin: BinaryIO,
    stdin_filename: str,
) -> dict[str, GistFile]:
    """Build the `filename -> GistFile` mapping.

    Stdin mode when `paths` is empty, file mode otherwise. In file mode the key
    is the base name, so a later path with the same base name wins.
    """

    files: dict[str, GistFile] = {}
    if not paths:
        try:
            raw = stdin.read()
        except OSError as exc:
            raise InputError(f"error reading input: {exc}") from exc
        files[stdin_filename] = GistFile(content=_decode(raw))
        logger.debug("read %d bytes from stdin as %s", len(raw), stdin_filename)
        return files

    for path in paths:
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise InputError(f"error reading {path}: {exc}") from exc
        if path.name in files:
            logger.debug("%s overwrites an earlier file with the same name", path)
        files[path.name] = GistFile(content=_decode(raw))
        logger.debug("read %d bytes from %s", len(raw), path)
    return files


def build_payload(options: GistOptions, files: dict[str, GistFile]) -> GistPayload:
    return GistPayload(
        description=options.description,
        public=options.public,
        files=files,
    )


def encode_payload(payload: GistPayload) -> bytes:
    try:
        return payload.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, UnicodeError) as exc:
        raise EncodingError(f"could not encode to json: {exc}") from exc


def build_request(body: bytes, *, patch: str, api_base_url: str) -> GistRequest:
    """PATCH `/gists/<id>` when updating, POST `/gists` when creating."""

    base = api_base_url.rstrip("/")
    if patch:
        return GistRequest(method="PATCH", url=f"{base}/gists/{patch}", body=body)
    return GistRequest(method="POST", url=f"{base}/gists", body=body)


def publish_gist(
    options: GistOptions,
    paths: Sequence[str | Path],
    *,
    stdin: BinaryIO,
    settings: AppSettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> PublishResult:
    """Run the whole pipeline and return the API outcome.

    Local failures raise `GistError`; a non-2xx response is returned as-is.
    """

    settings = settings or AppSettings()
    token = resolve_token(token_sources_from_settings(options.token, settings))

    files = collect_files(paths, stdin=stdin, stdin_filename=options.stdin_filename)
    body = encode_payload(build_payload(options, files))
    request = build_request(body, patch=options.patch, api_base_url=settings.api_base_url)

    with build_client(settings, transport=transport) as client:
        result = send_gist_request(request, token=token, client=client)
    if not result.ok:
        logger.info("API answered %d for %s %s", result.status_code, request.method, request.url)
    return result
