"""
Base Pydantic models for devcenter.

Wire models talk to a server we do not control, so they accept unknown
response fields; request payloads serialize by alias (camelCase on the wire).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DevCenterBaseModel(BaseModel):
    """Base model for all devcenter Pydantic models.

    Configuration:
        - validate_assignment: Validate on attribute assignment
        - extra: Ignore unknown fields returned by the server
        - populate_by_name: Allow constructing with python field names
        - use_enum_values: Serialize enums as values
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )

    def to_payload(self) -> dict:
        """Serialize for a JSON request body, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ImmutableModel(DevCenterBaseModel):
    """Immutable base model for values that never change after creation."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )
