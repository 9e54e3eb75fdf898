"""Domain models (Pydantic v2).

Note:
- These models describe *what* a gist request/response is, not *how* it is
  sent. Wire field names match the gists REST API exactly.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

DEFAULT_STDIN_FILENAME = "gist.txt"
SUCCESS_STATUS_CODES = frozenset({200, 201})


class GistOptions(BaseModel):
    """Options resolved from the command line."""

    token: str = Field(
        default="",
        description="Explicit token (-token); empty means fall back to the environment.",
    )
    description: str = Field(
        default="",
        description="Description of the gist.",
    )
    patch: str = Field(
        default="",
        description="Id of an existing gist to update; empty means create a new one.",
    )
    filename: str = Field(
        default="",
        description="Entry name for stdin content; empty means the placeholder name.",
    )
    public: bool = Field(
        default=False,
        description="Create a public gist.",
    )

    @property
    def stdin_filename(self) -> str:
        return self.filename or DEFAULT_STDIN_FILENAME


class TokenSources(BaseModel):
    """The three token sources, in precedence order."""

    explicit: str | None = None
    gist_token: str | None = None
    github_token: str | None = None


class GistFile(BaseModel):
    content: str


class GistPayload(BaseModel):
    """Request body for create/update."""

    description: str = ""
    public: bool = False
    files: dict[str, GistFile] = Field(default_factory=dict)


class GistRequest(BaseModel):
    """A fully built request, threaded explicitly to the transport."""

    method: str
    url: str
    body: bytes


class GistResponse(BaseModel):
    """Subset of the API response we care about.

    Every field has a zero default so that a partially parsed body still
    produces a usable record.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    url: str = ""
    forks_url: str = ""
    html_url: str = ""
    created_at: datetime | None = None


class PublishResult(BaseModel):
    """Outcome of the single API call."""

    status_code: int
    body: bytes = b""
    gist: GistResponse = Field(default_factory=GistResponse)

    @property
    def ok(self) -> bool:
        return self.status_code in SUCCESS_STATUS_CODES
