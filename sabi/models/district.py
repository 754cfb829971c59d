"""District model."""

from pydantic import ConfigDict

from sabi.models.base import CamelModel


class District(CamelModel):
    """Named submarket with reference coordinates."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> tuple[float, float]:
        return self.latitude, self.longitude
