"""Error taxonomy for the gist pipeline.

Each stage raises one of these instead of exiting; the CLI decides the exit
status and message formatting in a single place.

Remote failures (non-2xx responses) are not errors here: they are reported
through `PublishResult` and the process still exits 0.
"""

from __future__ import annotations


class GistError(Exception):
    """Base class for fatal, local failures."""


class ConfigurationError(GistError):
    """Missing or unusable configuration (e.g. no token)."""


class InputError(GistError):
    """Stdin or a named file could not be read."""


class EncodingError(GistError):
    """The request payload could not be serialized."""


class TransportError(GistError):
    """Request construction, network failure or unreadable response body."""
