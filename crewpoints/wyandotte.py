"""Hebda Cup and Wy-Hi team points, as run by the Wyandotte Boat Club.

Both systems keep combined, men's and women's standings; they differ in how
an event's maximum points are split between the placing crews.
"""
from typing import Dict, List

from loguru import logger

from .events import is_womens_event
from .models import Results, Standing
from .points import (
    event_team_points,
    hebda_max_points,
    hebda_scale,
    is_final_only,
    wyhi_max_points,
    wyhi_scale,
)
from .scoring import (
    PLACEHOLDER_TEAM_NAMES,
    accumulate_team_points,
    add_missing_teams,
    every_event,
    rank_categories,
)

# 'No Race' fills lanes of events that were not held
WYANDOTTE_PLACEHOLDERS = PLACEHOLDER_TEAM_NAMES + ("No Race",)

WYANDOTTE_CATEGORIES = [
    ("combined", every_event),
    ("mens", lambda name: not is_womens_event(name)),
    ("womens", is_womens_event),
]

WYANDOTTE_TABLES = {"combined": "combined", "mens": "mens", "womens": "womens"}


def hebda_calculate_event_team_points(event) -> Dict[str, float]:
    max_points = hebda_max_points(event.event)
    return event_team_points(
        event, max_points, lambda entries, place: hebda_scale(entries, place, max_points)
    )


def wyhi_calculate_event_team_points(event) -> Dict[str, float]:
    max_points = wyhi_max_points(event.event)
    final_only = is_final_only(event.event_info)
    return event_team_points(
        event, max_points, lambda entries, place: wyhi_scale(entries, place, max_points, final_only)
    )


def _wyandotte_points(results: Results, event_points):
    team_points = accumulate_team_points(results, event_points, WYANDOTTE_CATEGORIES)
    add_missing_teams(team_points, results, WYANDOTTE_CATEGORIES, placeholders=WYANDOTTE_PLACEHOLDERS)
    return team_points


def hebda_points_impl(results: Results):
    team_points = _wyandotte_points(results, hebda_calculate_event_team_points)
    logger.info(f"Hebda points: {len(team_points)} teams")
    return team_points


def wyhi_points_impl(results: Results):
    team_points = _wyandotte_points(results, wyhi_calculate_event_team_points)
    logger.info(f"Wy-Hi points: {len(team_points)} teams")
    return team_points


def hebda_points_calc(results: Results) -> Dict[str, List[Standing]]:
    return rank_categories(hebda_points_impl(results), WYANDOTTE_TABLES)


def wyhi_points_calc(results: Results) -> Dict[str, List[Standing]]:
    return rank_categories(wyhi_points_impl(results), WYANDOTTE_TABLES)
