from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Optional


class ResultsFormatError(ValueError):
    """Raised when a results export is missing its required structure."""


class Gender(Enum):
    MENS = "Mens"
    WOMENS = "Womens"
    MIXED = "Mixed"
    UNKNOWN = "Unknown"


def _parse_place(value) -> Optional[int]:
    # CrewTimer uses 0 or "" for DNF/DNS/DQ
    if value is None or value == "":
        return None
    try:
        place = int(value)
    except (TypeError, ValueError):
        return None
    return place if place > 0 else None


@dataclass
class Entry:
    crew: str
    stroke: str = ""
    place: Optional[int] = None
    adj_time: str = ""
    penalty_code: str = ""
    bow: str = ""
    event_num: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(
            crew=data.get("Crew") or "",
            stroke=data.get("Stroke") or "",
            place=_parse_place(data.get("Place")),
            adj_time=data.get("AdjTime") or "",
            penalty_code=data.get("PenaltyCode") or "",
            bow=str(data.get("Bow") or ""),
            event_num=str(data.get("EventNum") or ""),
        )


@dataclass
class EventResult:
    event: str
    event_num: str = ""
    event_info: str = ""
    entries: List[Entry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        return cls(
            event=data.get("Event") or "",
            event_num=str(data.get("EventNum") or ""),
            event_info=data.get("EventInfo") or "",
            entries=[Entry.from_dict(e) for e in data.get("entries") or []],
        )


@dataclass
class RegattaInfo:
    name: str = ""
    date: str = ""
    json: str = ""

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data.get("Title") or data.get("Name") or "",
            date=data.get("Date") or "",
            json=data.get("json") or "",
        )


@dataclass
class Results:
    results: List[EventResult]
    regatta_info: RegattaInfo = field(default_factory=RegattaInfo)

    @classmethod
    def from_dict(cls, data):
        """Build from a CrewTimer results export (already decoded from JSON)."""
        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise ResultsFormatError("results export has no 'results' array")
        return cls(
            results=[EventResult.from_dict(e) for e in data["results"]],
            regatta_info=RegattaInfo.from_dict(data.get("regattaInfo") or {}),
        )


@dataclass
class Standing:
    name: str
    points: float
    place: int = 0

    def to_dict(self):
        return asdict(self)


@dataclass
class Trophy:
    name: str
    criteria: str
    winner: str = ""
    winner_club: str = ""
    winner_time: str = ""

    def to_dict(self):
        return asdict(self)


@dataclass
class TeamResult:
    team: str
    points: float
    place: int = 0
    team_size: Optional[int] = None
    division: str = "unknown"

    def to_dict(self):
        return asdict(self)
