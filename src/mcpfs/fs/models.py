"""Resource payloads for ``resources/list`` and ``resources/read``."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Resource(BaseModel):
    """A file under the root, addressed by a ``file://`` URI."""

    model_config = ConfigDict(populate_by_name=True)

    uri: str
    name: str = Field(..., description="Path relative to the root, '/'-separated.")
    description: str = ""
    mime_type: str = Field(default="application/octet-stream", alias="mimeType")


class ResourceContent(BaseModel):
    """The full contents of one resource, as text or base64 blob."""

    model_config = ConfigDict(populate_by_name=True)

    uri: str
    mime_type: str = Field(default="application/octet-stream", alias="mimeType")
    text: str | None = None
    blob: str | None = None

    @model_validator(mode="after")
    def _one_payload(self) -> ResourceContent:
        if (self.text is None) == (self.blob is None):
            msg = "exactly one of 'text' or 'blob' must be set"
            raise ValueError(msg)
        return self
