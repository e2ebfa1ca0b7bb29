#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lon: float

    @staticmethod
    def is_valid(lat: float, lon: float) -> bool:
        return -90 <= lat <= 90 and -180 <= lon <= 180

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['Coordinate']:
        """Build a coordinate from a geocoding entry, or None if lat/lon are missing."""
        if "lat" not in data or "lon" not in data:
            return None
        return cls(lat=float(data["lat"]), lon=float(data["lon"]))

    @property
    def in_range(self) -> bool:
        return self.is_valid(self.lat, self.lon)

    def __str__(self):
        return f"Lat={self.lat}, Lon={self.lon}"
