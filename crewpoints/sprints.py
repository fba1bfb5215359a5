"""MSRA Sprints team points.

Events of up to 8 crews race heats and a final and score 100% and 50% of the
boat class maximum for first and second. Events of 9-12 crews add semifinals
and score 100/75/25/25%.
"""
from typing import Dict, List

from loguru import logger

from .events import is_junior_event, is_sculling_event, is_womens_event
from .models import Results, Standing
from .points import event_team_points, sprints_max_points, sprints_scale
from .scoring import (
    accumulate_team_points,
    add_missing_teams,
    coed_teams,
    every_event,
    rank_categories,
    restrict_combined_to_coed,
)

# rank on points rounded to hundredths so float noise does not split ties
PLACE_DIGITS = 2

SPRINTS_CATEGORIES = [
    ("combined", every_event),
    ("mens_scull", lambda name: not is_womens_event(name) and is_sculling_event(name)),
    ("womens_scull", lambda name: is_womens_event(name) and is_sculling_event(name)),
    ("mens_sweep", lambda name: not is_womens_event(name) and not is_sculling_event(name)),
    ("womens_sweep", lambda name: is_womens_event(name) and not is_sculling_event(name)),
    ("junior", is_junior_event),
]

FULL_TABLES = {
    "combined": "combined",
    "mens_scull": "mens_scull",
    "womens_scull": "womens_scull",
    "mens_sweep": "mens_sweep",
    "womens_sweep": "womens_sweep",
    "junior": "junior",
}

SIMPLE_TABLES = {
    "combined": "combined",
    "combined_sweep": ["womens_sweep", "mens_sweep"],
    "combined_scull": ["womens_scull", "mens_scull"],
    "mens": ["mens_scull", "mens_sweep"],
    "womens": ["womens_scull", "womens_sweep"],
    "junior": "junior",
}


def calculate_event_team_points(event) -> Dict[str, float]:
    return event_team_points(event, sprints_max_points(event.event), sprints_scale)


def sprints_points_impl(results: Results, coed_teams_only_in_combined=False):
    team_points = accumulate_team_points(results, calculate_event_team_points, SPRINTS_CATEGORIES)
    if coed_teams_only_in_combined:
        restrict_combined_to_coed(team_points, coed_teams(results))
    add_missing_teams(team_points, results, SPRINTS_CATEGORIES)
    logger.info(f"Sprints points: {len(team_points)} teams")
    return team_points


def sprints_full_points_calc(results: Results, coed_teams_only_in_combined=False) -> Dict[str, List[Standing]]:
    team_points = sprints_points_impl(results, coed_teams_only_in_combined)
    return rank_categories(team_points, FULL_TABLES, digits=PLACE_DIGITS)


def sprints_points_calc(results: Results) -> Dict[str, List[Standing]]:
    """Overall, sweep, sculling, men's, women's and junior trophy standings."""
    team_points = sprints_points_impl(results)
    return rank_categories(team_points, SIMPLE_TABLES, digits=PLACE_DIGITS)
