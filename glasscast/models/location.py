"""Geocoded place models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    region: str | None = None  # admin1, e.g. "England"
    country_code: str | None = None

    @property
    def label(self) -> str:
        """Suggestion row text: name followed by region and country code."""
        detail = ", ".join(p for p in (self.region, self.country_code) if p)
        if not detail:
            return self.name
        return f"{self.name} ({detail})"
