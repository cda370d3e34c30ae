"""Satellite pass and observer value types."""

from dataclasses import dataclass
from typing import Any

from passcal.exceptions import ValidationError
from passcal.utils.time_utils import duration_seconds


@dataclass(frozen=True)
class PassRecord:
    """A single overpass of a satellite.

    ``aos`` and ``los`` are Julian date day numbers. Ranges are not checked
    here; callers hand over already validated data.
    """
    satellite_name: str
    orbit_number: int
    aos: float
    los: float
    max_elevation_deg: float
    aos_azimuth_deg: float
    los_azimuth_deg: float

    @property
    def duration_seconds(self) -> int:
        """Whole seconds between AOS and LOS."""
        return duration_seconds(self.aos, self.los)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PassRecord":
        """Create PassRecord instance from a pass table row.

        Accepts both the long field names and the short ones used by pass
        prediction exports (``satname``, ``orbit``, ``max_el``, ``aos_az``,
        ``los_az``).
        """
        missing = [key for key in ("aos", "los") if key not in data]
        if missing:
            raise ValidationError(
                "Pass data is missing AOS/LOS times",
                {"missing_fields": missing}
            )

        satellite_name = data.get("satellite_name", data.get("satname", ""))
        orbit_number = data.get("orbit_number", data.get("orbit", 0))
        max_el = data.get("max_elevation_deg", data.get("max_el", 0.0))
        aos_az = data.get("aos_azimuth_deg", data.get("aos_az", 0.0))
        los_az = data.get("los_azimuth_deg", data.get("los_az", 0.0))

        return cls(
            satellite_name=str(satellite_name),
            orbit_number=int(orbit_number),
            aos=float(data["aos"]),
            los=float(data["los"]),
            max_elevation_deg=float(max_el),
            aos_azimuth_deg=float(aos_az),
            los_azimuth_deg=float(los_az)
        )


@dataclass(frozen=True)
class Observer:
    """Ground station location."""
    latitude_deg: float
    longitude_deg: float
    name: str = ""  # Informational only, never rendered

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Observer":
        """Create Observer instance from a location mapping."""
        latitude = data.get("latitude_deg", data.get("lat"))
        longitude = data.get("longitude_deg", data.get("lon"))
        if latitude is None or longitude is None:
            raise ValidationError(
                "Observer requires latitude and longitude",
                {"fields": sorted(data)}
            )

        return cls(
            latitude_deg=float(latitude),
            longitude_deg=float(longitude),
            name=str(data.get("name", ""))
        )
