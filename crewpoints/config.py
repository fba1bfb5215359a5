import json
from dataclasses import dataclass, field
from typing import Dict, List

from loguru import logger

from .models import Results


class RegattaConfigError(ValueError):
    """Raised when the regatta's configuration blob cannot be decoded."""


# Older exports spell some keys differently
KEY_ALIASES = {
    "excludedClubsForPoints": "excludedClubs",
    "minEntriesForPoints": "minEntriesForLevel",
}


@dataclass
class RegattaConfig:
    excluded_clubs: List[str] = field(default_factory=list)
    min_entries_for_level: Dict[str, int] = field(default_factory=dict)
    min_entries: int = 0
    team_sizes: Dict[str, int] = field(default_factory=dict)
    division_overrides: Dict[str, str] = field(default_factory=dict)
    division_minimums: Dict[str, int] = field(default_factory=dict)
    has_team_sizes: bool = False

    @classmethod
    def from_json(cls, text):
        """Parse the free-form ``json`` field of the regatta info.

        An empty or missing blob gives the permissive defaults.
        """
        if not text or not text.strip():
            return cls()
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise RegattaConfigError(f"regatta configuration is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise RegattaConfigError("regatta configuration must be a JSON object")

        data = {}
        for key, value in raw.items():
            data[KEY_ALIASES.get(key, key)] = value

        excluded = data.get("excludedClubs")
        if excluded is not None and not isinstance(excluded, list):
            raise RegattaConfigError(f"excludedClubs must be a list of clubs, not {excluded!r}")

        try:
            config = cls(
                excluded_clubs=[str(c) for c in data.get("excludedClubs") or []],
                min_entries_for_level={
                    str(k): int(v) for k, v in (data.get("minEntriesForLevel") or {}).items()
                },
                min_entries=int(data.get("minEntries") or 0),
                team_sizes={str(k): int(v) for k, v in (data.get("teamSizes") or {}).items()},
                division_overrides={
                    str(k): str(v) for k, v in (data.get("divisionOverrides") or {}).items()
                },
                division_minimums={
                    str(k): int(v) for k, v in (data.get("divisionMinimums") or {}).items()
                },
                has_team_sizes=data.get("teamSizes") is not None,
            )
        except (AttributeError, TypeError, ValueError) as e:
            raise RegattaConfigError(f"bad value in regatta configuration: {e}") from e
        logger.debug(
            f"Regatta config: {len(config.excluded_clubs)} excluded clubs, "
            f"{len(config.team_sizes)} team sizes"
        )
        return config

    @classmethod
    def from_results(cls, results: Results):
        return cls.from_json(results.regatta_info.json)

    def min_entries_for(self, event_level):
        """Minimum valid entries an event of this level needs to score."""
        return max(self.min_entries, self.min_entries_for_level.get(event_level, 0))
