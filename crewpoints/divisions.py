"""MSRA team division standings.

Teams are scored with scaled Barnes points and then ranked within a division
chosen by team size: I for 55 or more athletes, II for 22 to 54, III below 22.
"""
from collections import namedtuple
from typing import Dict, List

from loguru import logger

from .barnes import barnes_points_impl
from .config import RegattaConfig
from .models import Results, TeamResult
from .placing import assign_places

Division = namedtuple("Division", ["name", "min", "max"])

UNKNOWN_DIVISION = "unknown"

# lower bound inclusive, upper bound exclusive
DEFAULT_DIVISION_MINIMUMS = {"I": 55, "II": 22, "III": 0}


def division_boundaries(minimums=None) -> List[Division]:
    """Divisions from largest to smallest, each ending where the next one up begins."""
    merged = dict(DEFAULT_DIVISION_MINIMUMS)
    merged.update(minimums or {})
    ordered = sorted(merged.items(), key=lambda item: item[1], reverse=True)

    divisions = []
    upper = float("inf")
    for name, minimum in ordered:
        divisions.append(Division(name, minimum, upper))
        upper = minimum
    return divisions


def division_for_team_size(team_size, divisions=None):
    """Name of the division for a team of this size, 'unknown' if none fits."""
    if team_size is None:
        return UNKNOWN_DIVISION
    for division in divisions or division_boundaries():
        if division.min <= team_size < division.max:
            return division.name
    return UNKNOWN_DIVISION


def points_by_division(results: Results) -> Dict[str, List[TeamResult]]:
    """Scaled Barnes standings split into divisions by team size.

    Teams with no configured size are listed under 'unknown'. A regatta with
    no team sizes at all yields a single empty 'unknown' table.
    """
    config = RegattaConfig.from_results(results)
    if not config.has_team_sizes:
        logger.info("No team sizes configured, divisions not computed")
        return {UNKNOWN_DIVISION: []}

    divisions = division_boundaries(config.division_minimums)
    tables: Dict[str, List[TeamResult]] = {d.name: [] for d in divisions}
    tables[UNKNOWN_DIVISION] = []

    team_points = barnes_points_impl(results, use_scaled_events=True)
    for team, totals in team_points.items():
        team_size = config.team_sizes.get(team)
        division = config.division_overrides.get(team) or division_for_team_size(team_size, divisions)
        tables.setdefault(division, []).append(
            TeamResult(team=team, points=totals["combined"], team_size=team_size, division=division)
        )

    for table in tables.values():
        table.sort(key=lambda t: t.points, reverse=True)
        assign_places(table)

    return tables
