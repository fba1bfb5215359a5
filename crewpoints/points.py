"""Points tables for each scoring system and the per-event allocator.

The tables are kept exactly as published by each regatta even where a row
looks uneven; different seasons disagree and the values are not ours to fix.
"""
import re
from typing import Callable, Dict

from loguru import logger

from .events import is_a_final, root_team_name

EXHIB_PENALTY_CODE = "Exhib"

BOAT_CLASS_EXPR = re.compile(r".* ([1248])[X\-+]")
HEBDA_BOAT_CLASS_EXPR = re.compile(r".* ([248])[X\-+]")

# Barnes: max points by boat size, fraction of max by entries in the final
BARNES_MAX_POINTS = {1: 10, 2: 15, 4: 20, 8: 30}
BARNES_DEFAULT_MAX = 10

BARNES_POINTS = {
    2: [1, 0.2],
    3: [1, 0.4, 0.2],
    4: [1, 0.6, 0.3, 0.05],
    5: [1, 0.8, 0.4, 0.1],
    6: [1, 0.8, 0.4, 0.2, 0.1, 0.05],
}

NOVICE_MATCHERS = [re.compile(p) for p in (r"NOV", r"FRESHMAN", r"FROSH", r"3V", r"3RD")]
JUNIOR_MATCHERS = [re.compile(p) for p in (r"JUNIOR", r"JNR", r"JR", r"2V", r"2ND")]

# FIRA / Mitchell
FIRA_MAX_POINTS = {1: 5, 2: 10, 4: 15}
FIRA_DEFAULT_MAX = 5
FIRA_EIGHT_VARSITY = 30
FIRA_EIGHT_LIGHTWEIGHT_JV = 25
FIRA_EIGHT_FROSH_NOVICE = 20
LT_JV_MATCHERS = [re.compile(p) for p in (r"LIGHTWEIGHT", r"LTWT", r"JV", r"JUNIOR VARSITY")]
FROSH_NOVICE_MATCHERS = [re.compile(p) for p in (r"FROSH", r"NOVICE", r"F/N")]

FIRA_POINTS = {
    2: [1, 0.2],
    3: [1, 0.4, 0.2],
    4: [1, 0.6, 0.3, 0.05],
    5: [1, 0.8, 0.4, 0.1, 0.05],
    6: [1, 0.8, 0.4, 0.2, 0.1, 0.05],
}

# Sprints: heats then final for up to 8 crews, heats/semis/final for 9-12
SPRINTS_HEATS_FINALS = {1: [1]}
SPRINTS_HEATS_FINALS.update({n: [1, 0.5] for n in range(2, 9)})
SPRINTS_HEATS_SEMIS_FINALS = {n: [1, 0.75, 0.25, 0.25] for n in range(9, 13)}

# Hebda Cup: tables keyed by the event's max points
HEBDA_MAX_POINTS = {2: 2, 4: 5, 8: 9}
HEBDA_DEFAULT_MAX = 2
HEBDA_POINTS = {
    2: [1, 1 / 2, 1 / 4],
    5: [1, 2 / 5, 1 / 5],
    9: [1, 4 / 9, 2 / 9],
}

# Wy-Hi: tables keyed by the event's max points
WYHI_MAX_POINTS = {1: 10, 2: 15, 4: 20, 8: 30}
WYHI_DEFAULT_MAX = 10
WYHI_FINAL_ONLY = {
    10: [1, 1 / 2, 3 / 10, 1 / 10, 0, 0, 0],
    15: [1, 8 / 15, 4 / 15, 2 / 15, 1 / 15, 0, 0],
    20: [1, 1 / 2, 1 / 4, 3 / 20, 1 / 10, 1 / 20, 0],
    30: [1, 1 / 2, 4 / 15, 2 / 15, 1 / 15, 1 / 30, 0],
}
WYHI_FROM_HEATS = {
    10: [1, 4 / 5, 3 / 5, 1 / 2, 2 / 5, 3 / 10, 1 / 5],
    15: [1, 11 / 15, 8 / 15, 2 / 5, 1 / 3, 4 / 15, 1 / 5],
    20: [1, 3 / 4, 11 / 20, 2 / 5, 3 / 10, 1 / 4, 1 / 5],
    30: [1, 23 / 30, 17 / 30, 13 / 30, 1 / 3, 4 / 15, 1 / 5],
}
FINAL_ONLY_INFO = "FINAL ONLY"

# ACA: sprint distances score 6 lanes, distance races 9
ACA_SPRINT_POINTS = [9, 7, 5, 3, 2, 1]
ACA_DISTANCE_POINTS = [12, 10, 8, 6, 5, 4, 3, 2, 1]
ACA_SPRINT_MAX_DISTANCE = 1000

SIMPLE_SCORING_PLACES = 3


def _boat_size(event_name, expr=BOAT_CLASS_EXPR):
    match = expr.match(event_name.upper())
    return int(match.group(1)) if match else None


def _table_fraction(scalars, place):
    if not scalars or place > len(scalars):
        return 0
    return scalars[place - 1]


def count_entries(entries):
    """Number of entries in an event, not counting exhibition crews."""
    return sum(1 for e in entries if e.penalty_code != EXHIB_PENALTY_CODE)


def event_team_points(
    event, max_points, scale: Callable[[int, int], float], strip_seeding=False
) -> Dict[str, float]:
    """Points earned by each team in one event.

    Only A finals score. Entries are visited in finishing order and only the
    first boat of each root team name counts, so B boats and second entries
    never add to (or take from) their team.
    """
    team_points = {}
    if not is_a_final(event.event, event.event_num):
        return team_points

    num_entries = count_entries(event.entries)
    placing = sorted(event.entries, key=lambda e: e.place or float("inf"))

    for entry in placing:
        if not entry.place or entry.penalty_code == EXHIB_PENALTY_CODE:
            continue  # DNF, DNS, DQ, exhibition
        team = root_team_name(entry.crew, strip_seeding)
        if team in team_points:
            continue
        team_points[team] = max_points * scale(num_entries, entry.place)

    logger.debug(f"{event.event}: {len(team_points)} teams placed from {num_entries} entries")
    return team_points


def barnes_event_scale(event_name, use_scaled_events):
    """1st varsity 100%, 2nd varsity/junior/JV 80%, 3rd varsity/novice/frosh 60%."""
    if not use_scaled_events:
        return 1
    name = event_name.upper()
    if any(m.search(name) for m in NOVICE_MATCHERS):
        return 0.6
    if any(m.search(name) for m in JUNIOR_MATCHERS):
        return 0.8
    return 1


def barnes_max_points(event_name, use_scaled_events=False):
    points = BARNES_MAX_POINTS.get(_boat_size(event_name), BARNES_DEFAULT_MAX)
    return points * barnes_event_scale(event_name, use_scaled_events)


def barnes_scale(num_entries, place):
    if num_entries < 2:
        return 0
    # snap to 6, even if there were more lanes
    return _table_fraction(BARNES_POINTS.get(min(num_entries, 6)), place)


def fira_max_points(event_name):
    name = event_name.upper()
    size = _boat_size(name)
    if size == 8:
        if any(m.search(name) for m in LT_JV_MATCHERS):
            return FIRA_EIGHT_LIGHTWEIGHT_JV
        if any(m.search(name) for m in FROSH_NOVICE_MATCHERS):
            return FIRA_EIGHT_FROSH_NOVICE
        return FIRA_EIGHT_VARSITY
    return FIRA_MAX_POINTS.get(size, FIRA_DEFAULT_MAX)


def fira_scale(num_entries, place):
    if num_entries < 2:
        return 0
    return _table_fraction(FIRA_POINTS.get(min(num_entries, 6)), place)


def sprints_max_points(event_name):
    return barnes_max_points(event_name)


def sprints_scale(num_entries, place):
    if num_entries <= 8:
        scalars = SPRINTS_HEATS_FINALS.get(num_entries)
    else:
        scalars = SPRINTS_HEATS_SEMIS_FINALS.get(num_entries)
    return _table_fraction(scalars, place)


def hebda_max_points(event_name):
    return HEBDA_MAX_POINTS.get(_boat_size(event_name, HEBDA_BOAT_CLASS_EXPR), HEBDA_DEFAULT_MAX)


def hebda_scale(num_entries, place, max_points):
    """Hebda scores one place fewer than there were crews, at most three."""
    if num_entries < 2:
        return 0
    scoring_places = min(num_entries - 1, 3)
    if place > scoring_places:
        return 0
    return _table_fraction(HEBDA_POINTS.get(max_points), place)


def wyhi_max_points(event_name):
    return WYHI_MAX_POINTS.get(_boat_size(event_name), WYHI_DEFAULT_MAX)


def is_final_only(event_info):
    return event_info.upper() == FINAL_ONLY_INFO


def wyhi_scale(num_entries, place, max_points, final_only):
    table = WYHI_FINAL_ONLY if final_only else WYHI_FROM_HEATS
    if place > num_entries:
        return 0
    return _table_fraction(table.get(max_points), place)


def simple_points(seats, place):
    """Seat-count scheme: 3, 2 and 1 points per seat for the top three."""
    if not place or place > SIMPLE_SCORING_PLACES:
        return 0
    return seats * (SIMPLE_SCORING_PLACES + 1 - place)


def aca_points(place, distance):
    """Points available to a boat for its place in a race of this distance."""
    table = ACA_SPRINT_POINTS if distance <= ACA_SPRINT_MAX_DISTANCE else ACA_DISTANCE_POINTS
    return _table_fraction(table, place)
