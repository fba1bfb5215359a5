"""Barnes scoring system, as described by MSRA.

Every A final is worth a maximum set by boat size (1x 10, 2 15, 4 20, 8 30),
optionally scaled down for junior (80%) and novice (60%) events, and each
place earns a fraction of that maximum depending on how many crews raced.
"""
from functools import partial
from typing import Dict, List

from loguru import logger

from .events import is_sculling_event, is_womens_event
from .models import Results, Standing
from .points import barnes_max_points, barnes_scale, event_team_points
from .scoring import (
    accumulate_team_points,
    add_missing_teams,
    coed_teams,
    every_event,
    rank_categories,
    restrict_combined_to_coed,
)

BARNES_CATEGORIES = [
    ("combined", every_event),
    ("mens_scull", lambda name: not is_womens_event(name) and is_sculling_event(name)),
    ("womens_scull", lambda name: is_womens_event(name) and is_sculling_event(name)),
    ("mens_sweep", lambda name: not is_womens_event(name) and not is_sculling_event(name)),
    ("womens_sweep", lambda name: is_womens_event(name) and not is_sculling_event(name)),
]

FULL_TABLES = {
    "combined": "combined",
    "mens_scull": "mens_scull",
    "womens_scull": "womens_scull",
    "mens_sweep": "mens_sweep",
    "womens_sweep": "womens_sweep",
}

SIMPLE_TABLES = {
    "combined": "combined",
    "mens": ["mens_scull", "mens_sweep"],
    "womens": ["womens_scull", "womens_sweep"],
}


def calculate_event_team_points(event, use_scaled_events=False) -> Dict[str, float]:
    max_points = barnes_max_points(event.event, use_scaled_events)
    return event_team_points(event, max_points, barnes_scale)


def barnes_points_impl(results: Results, use_scaled_events=False, coed_teams_only_in_combined=False):
    """Per-team totals for each Barnes category, non-scoring teams included."""
    team_points = accumulate_team_points(
        results,
        partial(calculate_event_team_points, use_scaled_events=use_scaled_events),
        BARNES_CATEGORIES,
    )
    if coed_teams_only_in_combined:
        restrict_combined_to_coed(team_points, coed_teams(results))
    add_missing_teams(team_points, results, BARNES_CATEGORIES)

    logger.info(f"Barnes points: {len(team_points)} teams")
    return team_points


def barnes_full_points_calc(
    results: Results, use_scaled_events=False, coed_teams_only_in_combined=False
) -> Dict[str, List[Standing]]:
    """Standings with sculling and sweep split out by gender."""
    team_points = barnes_points_impl(results, use_scaled_events, coed_teams_only_in_combined)
    return rank_categories(team_points, FULL_TABLES)


def barnes_points_calc(results: Results, use_scaled_events=False) -> Dict[str, List[Standing]]:
    """Combined, men's and women's standings."""
    team_points = barnes_points_impl(results, use_scaled_events)
    return rank_categories(team_points, SIMPLE_TABLES)
