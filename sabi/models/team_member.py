"""Team member model - people shown on the About page."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sabi.models.base import CamelModel


class TeamMember(CamelModel):
    """Team member; inactive members are hidden publicly but kept in storage."""
    id: str
    name: str
    role: str
    bio: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    display_order: int = Field(default=0, description="Ascending sort key")
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateTeamMemberInput(CamelModel):
    name: str = Field(..., min_length=1)
    role: str = Field(..., min_length=1)
    bio: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    display_order: int = 0
    is_active: bool = True


class UpdateTeamMemberInput(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    role: Optional[str] = Field(None, min_length=1)
    bio: Optional[str] = None
    image: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

    def changes(self) -> dict:
        return self.model_dump(mode="json", exclude_unset=True)
