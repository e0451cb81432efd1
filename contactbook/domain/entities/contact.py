from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

RECORD_FIELDS = ("id", "name", "email", "phone")


class Contact(BaseModel):
    """A single stored contact.

    Text fields are kept exactly as given: no trimming, no format checks.
    """

    id: StrictInt | StrictStr = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, not validated")
    phone: str = Field(..., description="Phone number, not validated")

    # Unknown keys are dropped on read, so the next rewrite of the file loses them.
    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Contact":
        return cls.model_validate(record)

    def to_record(self) -> dict[str, Any]:
        """Return the JSON object written to the store file, keys in file order."""
        return {key: getattr(self, key) for key in RECORD_FIELDS}
