from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from onelink.tables import DEFAULT_MIME_TYPE


class RequestArgs(BaseModel):
    """Form payload for one OTX request, keyed by wire names on dump."""

    account: str = Field(serialization_alias="otx_account")
    mime_type: str = Field(default=DEFAULT_MIME_TYPE, serialization_alias="otx_mimetype")
    service_type: str = Field(serialization_alias="otx_service")
    content: str = Field(serialization_alias="otx_content")

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_form(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
