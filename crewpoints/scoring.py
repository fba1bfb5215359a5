from typing import Callable, Dict, List, Tuple

from loguru import logger

from .events import is_womens_event, root_team_name
from .models import Results, Standing
from .placing import summarize_points
from .points import EXHIB_PENALTY_CODE

PLACEHOLDER_TEAM_NAMES = ("Empty",)

# (category name, accepts(event name))
Category = Tuple[str, Callable[[str], bool]]

TeamTotals = Dict[str, Dict[str, float]]


def every_event(event_name):
    return True


def accumulate_team_points(results: Results, event_points, categories: List[Category]) -> TeamTotals:
    """Fold each event's team points into every category that accepts the event.

    ``event_points(event)`` returns {team: points} for one event. One event
    feeds many categories at once, e.g. combined, womens and womens sweep.
    """
    names = [name for name, _ in categories]
    team_points: TeamTotals = {}

    for event in results.results:
        earned = event_points(event)
        if not earned:
            continue
        applicable = [name for name, accepts in categories if accepts(event.event)]
        for team, points in earned.items():
            totals = team_points.setdefault(team, dict.fromkeys(names, 0))
            for name in applicable:
                totals[name] += points

    return team_points


def add_missing_teams(
    team_points: TeamTotals,
    results: Results,
    categories: List[Category],
    placeholders=PLACEHOLDER_TEAM_NAMES,
    strip_seeding=False,
) -> TeamTotals:
    """Give teams that entered but never scored a row of zeros.

    Exhibition entries and placeholder crews do not count as being entered.
    """
    names = [name for name, _ in categories]
    missing = []
    for event in results.results:
        for entry in event.entries:
            team = root_team_name(entry.crew, strip_seeding)
            if team in team_points or team in missing or team in placeholders:
                continue
            if entry.penalty_code == EXHIB_PENALTY_CODE:
                continue
            missing.append(team)

    for team in missing:
        team_points[team] = dict.fromkeys(names, 0)

    if missing:
        logger.debug(f"Added {len(missing)} non-scoring teams")
    return team_points


def coed_teams(results: Results, strip_seeding=False):
    """Teams with entries in both women's and men's (or open) events."""
    womens = set()
    mens = set()
    for event in results.results:
        bucket = womens if is_womens_event(event.event) else mens
        for entry in event.entries:
            bucket.add(root_team_name(entry.crew, strip_seeding))
    return womens & mens


def restrict_combined_to_coed(team_points: TeamTotals, coed, category="combined") -> TeamTotals:
    """Single gender teams keep their gender points but get nothing toward the combined trophy."""
    for team, totals in team_points.items():
        if team not in coed:
            totals[category] = 0
    return team_points


def rank_category(team_points: TeamTotals, key, drop_zero=False, digits=None) -> List[Standing]:
    """Rank teams on one category, or on the sum of several."""
    keys = [key] if isinstance(key, str) else list(key)
    points = {team: sum(totals[k] for k in keys) for team, totals in team_points.items()}
    return summarize_points(points, drop_zero=drop_zero, digits=digits)


def rank_categories(team_points: TeamTotals, tables, **kwargs) -> Dict[str, List[Standing]]:
    """``tables`` maps each output table name to a category or list of categories."""
    return {name: rank_category(team_points, key, **kwargs) for name, key in tables.items()}
