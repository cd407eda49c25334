"""Output data models for converted API operations.

Both the Swagger 2.0 and the OpenAPI 3.x walkers emit these models, so
downstream code sees one HAR-shaped request type regardless of the input.
"""

from pydantic import BaseModel, ConfigDict, Field


class Param(BaseModel):
    """A name/value pair used for query, header and form entries."""

    name: str
    value: str  # always the {{name}} placeholder


class TextPostData(BaseModel):
    """A JSON or plain-text request body."""

    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(alias="mimeType")
    text: str


class FormPostData(BaseModel):
    """An application/x-www-form-urlencoded request body."""

    model_config = ConfigDict(populate_by_name=True)

    mime_type: str = Field(default="application/x-www-form-urlencoded", alias="mimeType")
    params: list[Param]


class HarRequest(BaseModel):
    """The request half of a HAR entry for one operation."""

    model_config = ConfigDict(populate_by_name=True)

    method: str
    url: str
    headers: list[Param] = []
    query_string: list[Param] = Field(default=[], alias="queryString")
    post_data: TextPostData | FormPostData | None = Field(default=None, alias="postData")

    def to_har(self) -> dict:
        """Dump using HAR field names (queryString, postData, mimeType)."""
        return self.model_dump(by_alias=True)
