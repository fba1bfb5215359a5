"""FIRA (Mitchell) team points.

D1 and IRA events are not eligible for points; guests still score but teams
that end on zero are left off the tables.
"""
import re
from typing import Dict, List

from loguru import logger

from .events import is_womens_event
from .models import Results, Standing
from .points import event_team_points, fira_max_points, fira_scale
from .scoring import accumulate_team_points, add_missing_teams, every_event, rank_categories

EXCLUDED_EVENT_MATCHERS = [
    re.compile(p) for p in (r"DIVI", r"DI", r"DIV1", r"D1", r"DIV-I", r"DIV-1", r"IRA")
]
# 'DII' would otherwise be caught by 'DI'
DII_MATCHER = re.compile(r"(?:^|\W)DII(?:$|\W)")

FIRA_CATEGORIES = [
    ("overall", every_event),
    ("men", lambda name: not is_womens_event(name)),
    ("women", is_womens_event),
]

FIRA_TABLES = {"overall": "overall", "men": "men", "women": "women"}


def is_excluded_event(event_name):
    name = event_name.upper()
    if DII_MATCHER.search(name):
        return False
    return any(m.search(name) for m in EXCLUDED_EVENT_MATCHERS)


def calculate_event_team_points(event) -> Dict[str, float]:
    if is_excluded_event(event.event):
        logger.debug(f"{event.event}: not eligible for FIRA points")
        return {}
    return event_team_points(event, fira_max_points(event.event), fira_scale, strip_seeding=True)


def fira_points_impl(results: Results):
    team_points = accumulate_team_points(results, calculate_event_team_points, FIRA_CATEGORIES)
    add_missing_teams(team_points, results, FIRA_CATEGORIES, strip_seeding=True)
    logger.info(f"FIRA points: {len(team_points)} teams")
    return team_points


def fira_points_calc(results: Results) -> Dict[str, List[Standing]]:
    team_points = fira_points_impl(results)
    return rank_categories(team_points, FIRA_TABLES, drop_zero=True)
