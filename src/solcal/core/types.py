from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Iterator, Union
import re


class EventKind(Enum):
    """The four principal solar calendar events.

    Each member carries its slug, a display label, the calendar month in which
    it falls, and the apparent solar longitude (degrees) that defines it.
    """

    MARCH_EQUINOX = ("march-equinox", "March equinox", 3, 0.0)
    JUNE_SOLSTICE = ("june-solstice", "June solstice", 6, 90.0)
    SEPTEMBER_EQUINOX = ("september-equinox", "September equinox", 9, 180.0)
    DECEMBER_SOLSTICE = ("december-solstice", "December solstice", 12, 270.0)

    def __init__(self, slug: str, label: str, month: int, longitude_deg: float):
        self.slug = slug
        self.label = label
        self.month = month
        self.longitude_deg = longitude_deg

    def __str__(self) -> str:
        return self.slug

    @classmethod
    def parse(cls, text: Union[str, "EventKind"]) -> "EventKind":
        """
        Resolve an event kind from user input.

        Accepts members as-is and strings such as "march", "march-equinox",
        "MARCH_EQUINOX" or "MarchEquinox" (case and separators are ignored).
        """
        if isinstance(text, cls):
            return text
        key = re.sub(r"(?<=[a-z])(?=[A-Z])", "-", str(text).strip())
        key = key.lower().replace("_", "-").replace(" ", "-")
        for kind in cls:
            if key == kind.slug or key == kind.slug.split("-")[0]:
                return kind
        raise KeyError(f"Unknown event kind '{text}'. Available: {[k.slug for k in cls]}")


@dataclass(frozen=True)
class SolarEvent:
    year: int
    kind: EventKind
    julian_day: float       # corrected JDE
    timestamp: datetime     # UTC, second resolution
    mean_julian_day: float  # JDE0 before periodic correction

    @property
    def correction_days(self) -> float:
        return self.julian_day - self.mean_julian_day


@dataclass(frozen=True)
class AnnualSolarEvents:
    """All four solar events of one year, in calendar order."""
    year: int
    march_equinox: SolarEvent
    june_solstice: SolarEvent
    september_equinox: SolarEvent
    december_solstice: SolarEvent

    def get(self, kind: Union[str, EventKind]) -> SolarEvent:
        return getattr(self, EventKind.parse(kind).name.lower())

    def __iter__(self) -> Iterator[SolarEvent]:
        return iter((self.march_equinox, self.june_solstice, self.september_equinox, self.december_solstice))
