"""Site-wide contact settings editable from the back office."""

from typing import Optional

from sabi.models.base import CamelModel


class SiteSettings(CamelModel):
    whatsapp_number: str = "2348000000000"
    phone_number: str = "+234 800 000 0000"
    email: str = "hello@sabiconsults.com"
    instagram_handle: str = "sabi_consults"
    address: str = "Abuja, Nigeria"


class SiteSettingsUpdate(CamelModel):
    whatsapp_number: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    instagram_handle: Optional[str] = None
    address: Optional[str] = None

    def changes(self) -> dict:
        return {key: value for key, value in self.model_dump(mode="json", exclude_unset=True).items()
                if value is not None}
