"""Gists REST API adapter (pure I/O).

Sends one already-built `GistRequest` and turns the HTTP exchange into a
`PublishResult`. No retries, no rate-limit handling.
"""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from core.domain.models import GistRequest, GistResponse, PublishResult
from core.errors import TransportError

logger = logging.getLogger(__name__)


def auth_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"token {token}",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }


def parse_gist_response(body: bytes) -> GistResponse:
    """Best-effort parse of a response body.

    Never raises: invalid JSON yields an all-default record, and fields that
    fail validation are dropped while the rest are kept.
    """

    try:
        data = json.loads(body)
    except (ValueError, RecursionError) as exc:
        logger.debug("response body is not JSON: %s", exc)
        return GistResponse()
    if not isinstance(data, dict):
        logger.debug("response body is not a JSON object: %s", type(data).__name__)
        return GistResponse()

    try:
        return GistResponse.model_validate(data)
    except ValidationError as exc:
        bad = {err["loc"][0] for err in exc.errors() if err["loc"]}
        logger.debug("dropping unparsable response fields: %s", sorted(map(str, bad)))
        return GistResponse.model_validate({k: v for k, v in data.items() if k not in bad})


def send_gist_request(request: GistRequest, *, token: str, client: httpx.Client) -> PublishResult:
    """Send the request and read the full body.

    Raises `TransportError` on request construction, network or body-read
    failures. The response stream is closed whatever the read outcome.
    """

    try:
        http_request = client.build_request(
            request.method,
            request.url,
            content=request.body,
            headers=auth_headers(token),
        )
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
        raise TransportError(f"could not create request: {exc}") from exc

    logger.debug("%s %s (%d bytes)", request.method, request.url, len(request.body))
    try:
        response = client.send(http_request, stream=True)
    except httpx.HTTPError as exc:
        raise TransportError(f"could not make request: {exc}") from exc

    try:
        body = response.read()
    except httpx.HTTPError as exc:
        raise TransportError(f"could not read response: {exc}") from exc
    finally:
        response.close()

    logger.debug("response status %d (%d bytes)", response.status_code, len(body))
    return PublishResult(
        status_code=response.status_code,
        body=body,
        gist=parse_gist_response(body),
    )
