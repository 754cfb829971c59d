"""Inquiry models - contact form submissions."""

import re
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, ConfigDict, Field, field_validator

from sabi.models.base import CamelModel

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class InquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    CLOSED = "closed"


class Inquiry(CamelModel):
    id: str
    name: str
    email: str
    phone: str
    message: str
    listing_id: Optional[str] = Field(None, description="Listing the inquiry is about, if any")
    status: InquiryStatus = InquiryStatus.NEW
    created_at: Optional[datetime] = None


class InquirySubmission(CamelModel):
    """Public contact form payload."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    listing_id: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("listingId", "propertyId", "listing_id"),
        description="Listing the inquiry is about; older forms post propertyId",
    )

    @field_validator("email")
    @classmethod
    def _email_shape(cls, value: str) -> str:
        if value and not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value

    @field_validator("listing_id", mode="before")
    @classmethod
    def _blank_listing(cls, value):
        return value or None


class InquiryStatusUpdate(CamelModel):
    status: InquiryStatus
