"""OAuth client registration models for the UAA client.

Copyright (c) 2025 UAAClient. All rights reserved.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic_core import to_json


class ClientRegistration(BaseModel):
    """OAuth2 client as stored by the identity service's ``/oauth/clients`` API.

    Keys outside the known schema are kept as extension fields and written
    back unchanged, so newer server attributes survive a get/create cycle.
    """

    model_config = ConfigDict(extra="allow")

    # Unique within the identity zone
    client_id: str
    # authorization_code, password, implicit and/or client_credentials
    authorized_grant_types: list[str] | None = None
    # Ant-style patterns are allowed
    redirect_uri: list[str] | None = None
    scope: list[str] | None = None
    resource_ids: list[str] | None = None
    authorities: list[str] | None = None
    # True, or a list of scopes that do not require user approval
    autoapprove: bool | list[str] | None = None
    access_token_validity: int | None = Field(default=None, ge=0)
    refresh_token_validity: int | None = Field(default=None, ge=0)
    # Origin keys of the identity providers the client is limited to
    allowedproviders: list[str] | None = None
    name: str | None = None
    # Changing the salt revokes all active tokens of the client
    token_salt: str | None = None
    createdwith: str | None = None
    required_user_groups: list[str] | None = None
    # Space delimited to allow two secrets during rotation
    client_secret: str | None = None

    @property
    def extra(self) -> dict[str, Any]:
        """Extension fields not covered by the known schema."""
        return self.__pydantic_extra__

    def set_extra(self, key: str, value: Any) -> None:
        """Set an extension field.

        Raises:
            ValueError: If ``key`` names a known field.

        """
        if key in type(self).model_fields:
            raise ValueError(f"{key} is a known client field, set the attribute instead")
        self.extra[key] = value

    def get_extra(self, key: str) -> tuple[Any, bool]:
        """Return an extension field and whether it was present."""
        if key in self.extra:
            return self.extra[key], True
        return None, False

    def to_wire(self) -> dict[str, Any]:
        """Known fields that are set, merged with the extension fields.

        Extension values are copied as they are, including nulls.
        """
        data = self.model_dump(include=set(type(self).model_fields), exclude_none=True)
        data.update(self.extra)
        return data

    def to_json(self) -> str:
        return to_json(self.to_wire()).decode()

    @classmethod
    def from_json(cls, data: str | bytes) -> ClientRegistration:
        return cls.model_validate_json(data)
