"""District directory - the static list of Abuja districts served by the site."""

from typing import Iterable, Iterator, Optional

from sabi.models.district import District


class DistrictDirectory:
    """
    Read-only lookup of districts.

    Lookups are by exact, case-sensitive name. Enumeration keeps the
    display order the directory was built with.
    """

    def __init__(self, districts: Iterable[District]):
        self._ordered = tuple(districts)
        self._by_name = {district.name: district for district in self._ordered}
        if len(self._by_name) != len(self._ordered):
            raise ValueError("District names must be unique")

    def __iter__(self) -> Iterator[District]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def all(self) -> list[District]:
        return list(self._ordered)

    def get(self, name: str) -> Optional[District]:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return [district.name for district in self._ordered]

    def default_coordinates(self, name: str) -> Optional[tuple[float, float]]:
        """Reference (latitude, longitude) for a listing created without coordinates."""
        district = self.get(name)
        return district.coordinates if district else None


ABUJA_DISTRICTS = DistrictDirectory([
    District(id="maitama", name="Maitama", description="Diplomatic and high-end residential area",
             latitude=9.0820, longitude=7.4878),
    District(id="asokoro", name="Asokoro", description="Exclusive residential district near Aso Rock",
             latitude=9.0406, longitude=7.5149),
    District(id="wuse2", name="Wuse II", description="Vibrant commercial and residential hub",
             latitude=9.0677, longitude=7.4626),
    District(id="jabi", name="Jabi", description="Modern district with Jabi Lake",
             latitude=9.0736, longitude=7.4237),
    District(id="gwarinpa", name="Gwarinpa", description="Africa's largest housing estate",
             latitude=9.1019, longitude=7.3925),
    District(id="katampe", name="Katampe", description="Serene hillside residential area",
             latitude=9.0892, longitude=7.4456),
    District(id="lifecamp", name="Life Camp", description="Growing residential and commercial zone",
             latitude=9.0831, longitude=7.3847),
    District(id="utako", name="Utako", description="Central business and residential district",
             latitude=9.0582, longitude=7.4419),
])
