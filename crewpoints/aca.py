"""ACA canoe/kayak team and paddler points.

Regattas run 9 lanes. Races up to and including 1000m score the first 6
places (9-7-5-3-2-1); longer races score the first 9 (12-10-8-6-5-4-3-2-1).
Only A finals score; heats, exhibition and development races do not.

Points go to clubs undivided and to paddlers split evenly by seat. The
regatta configuration may exclude clubs (any boat carrying one of their
paddlers earns nothing) and set minimum entry counts per event level.
"""
import re
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Dict

from loguru import logger

from .config import RegattaConfig
from .events import (
    boat_class_from_name,
    distance_from_name,
    event_level_from_name,
    gender_from_event_name,
    is_a_final,
    is_exhibition_event,
    num_seats_from_name,
    strip_event_num,
)
from .models import Gender, Results, Trophy
from .placing import summarize_buckets, summarize_points
from .points import EXHIB_PENALTY_CODE, aca_points

INDEPENDENT_CLUB = "IND"
INDEPENDENT_EXPR = re.compile(r"^(indep|indiv)", re.I)


@dataclass(frozen=True)
class Award:
    """A race award given to the winner of one specific event."""
    name: str
    criteria: str
    boat_class: str
    distance: int
    gender: Gender
    level: str

    def matches(self, boat_class, distance, gender, level):
        return (
            self.boat_class == boat_class
            and self.distance == distance
            and self.gender == gender
            and self.level == level
        )


ACA_AWARDS = [
    Award(
        name="Francine Fox Award",
        criteria="Winner of the K1 500 U16 (Juvenile)Women",
        boat_class="K1",
        distance=500,
        gender=Gender.WOMENS,
        level="Juvenile",
    ),
]

# Nationals points trophies, keyed by the table they are decided on
NATIONALS_TROPHIES = {
    "C4": "Coach Bill Bragg Trophy",
    "Mens K4": "Chris Barlow Trophy",
    "Womens K4": "Alan Anderson Trophy",
}

PREFERRED_LEVEL_ORDER = [
    "Bantam",
    "Juvenile",
    "Junior",
    "Senior",
    "Masters",
    "MastersA",
    "MastersB",
    "MastersC",
    "Open",
    "ParaCanoe",
]


def clubs_from_stroke(stroke):
    """Club abbreviations for each seat, from 'FC; BHAM' or 'FC, BHAM'."""
    clubs = []
    for club in stroke.replace(",", ";").split(";"):
        club = club.strip()
        if not club:
            continue
        if INDEPENDENT_EXPR.match(club):
            club = INDEPENDENT_CLUB
        clubs.append(club)
    return clubs


def athletes_from_crew(crew):
    """Athlete names with spaces removed: 'So, Veronica' -> 'So,Veronica'."""
    return [name.replace(" ", "") for name in (a.strip() for a in crew.split(";")) if name]


def order_list(items, order):
    """Sort ``items`` so those in ``order`` come first, in that order."""
    remaining = list(dict.fromkeys(items))
    result = [item for item in order if item in remaining]
    return result + [item for item in remaining if item not in result]


def _add(bucket, key, points):
    bucket[key] = bucket.get(key, 0) + points


def _award_winners(awards, rows, winners, facets):
    """Record event winners against every matching award.

    A tie for first adds a blank-named copy of the award row after it.
    """
    for award in awards:
        if not award.matches(*facets):
            continue
        award_rows = rows[award.name]
        for entry in winners:
            row = award_rows[0]
            if row.winner:
                row = replace(row, name="")
                award_rows.append(row)
            row.winner = entry.crew.replace(" ", "")
            row.winner_club = entry.stroke
            row.winner_time = entry.adj_time


def aca_points_calc(results: Results, awards=ACA_AWARDS) -> Dict:
    """Calculate points per the ACA National Championships point scoring (section 71)."""
    config = RegattaConfig.from_results(results)
    excluded_clubs = set(config.excluded_clubs)

    club_points: Dict[str, float] = {}
    class_points = defaultdict(dict)
    level_points = defaultdict(dict)
    gender_class_points = defaultdict(dict)
    paddler_points: Dict[str, float] = {}
    paddler_level_points = defaultdict(dict)
    paddlers_by_club = defaultdict(set)
    award_rows = {award.name: [Trophy(award.name, award.criteria)] for award in awards}

    for event in results.results:
        if not is_a_final(event.event, event.event_num):
            continue
        if is_exhibition_event(event.event):
            continue

        title = strip_event_num(event.event, event.event_num)
        boat_class = boat_class_from_name(title)
        distance = distance_from_name(title)
        seats = num_seats_from_name(title)
        level = event_level_from_name(title)
        gender = gender_from_event_name(title)

        boats = []
        for entry in event.entries:
            if entry.penalty_code == EXHIB_PENALTY_CODE:
                continue
            clubs = clubs_from_stroke(entry.stroke)
            if excluded_clubs.intersection(clubs):
                logger.debug(f"{event.event}: {entry.crew} carries an excluded club")
                continue
            boats.append((entry, clubs))

        min_entries = config.min_entries_for(level)
        if len(boats) < min_entries:
            logger.debug(f"{event.event}: {len(boats)} entries, {min_entries} needed for points")
            continue

        for entry, clubs in boats:
            athletes = athletes_from_crew(entry.crew)

            # roster accounting; a single listed club owns every seat
            for i, athlete in enumerate(athletes):
                if clubs:
                    club = clubs[i] if i < len(clubs) else clubs[-1]
                    paddlers_by_club[club].add(athlete.lower())

            points = aca_points(entry.place, distance) if entry.place else 0
            if not points:
                continue  # DNF, DNS, DQ or outside the scoring places

            club_share = points / len(clubs) if clubs else 0
            for club in clubs:
                _add(club_points, club, club_share)
                _add(class_points[boat_class], club, club_share)
                _add(level_points[level], club, club_share)
                _add(gender_class_points[f"{gender.value} {boat_class}"], club, club_share)

            points_per_seat = points / seats
            for athlete in athletes:
                _add(paddler_points, athlete, points_per_seat)
                _add(paddler_level_points[level], athlete, points_per_seat)

        winners = [entry for entry, _ in boats if entry.place == 1]
        if winners:
            _award_winners(awards, award_rows, winners, (boat_class, distance, gender, level))

    # clubs that raced but never scored still get a row in every club table
    club_buckets = [club_points, *class_points.values(), *level_points.values(), *gender_class_points.values()]
    for event in results.results:
        if is_exhibition_event(event.event):
            continue
        for entry in event.entries:
            if entry.penalty_code == EXHIB_PENALTY_CODE:
                continue
            for club in clubs_from_stroke(entry.stroke):
                if club in excluded_clubs:
                    continue
                for bucket in club_buckets:
                    bucket.setdefault(club, 0)

    logger.info(f"ACA points: {len(club_points)} clubs, {len(paddler_points)} paddlers")

    return {
        "club_totals": summarize_points(club_points),
        "class_totals": summarize_buckets(class_points),
        "level_totals": summarize_buckets(level_points),
        "gender_class_totals": summarize_buckets(gender_class_points),
        "paddler_totals": summarize_points(paddler_points),
        "paddler_level_totals": summarize_buckets(paddler_level_points),
        "paddlers_by_club": dict(paddlers_by_club),
        "trophies": [row for award in awards for row in award_rows[award.name]],
    }


def aca_nationals_points_calc(results: Results) -> Dict:
    """ACA points plus the C4, Mens K4 and Womens K4 nationals trophy tables."""
    points = aca_points_calc(results)
    trophy_tables = {
        "C4": points["class_totals"].get("C4", []),
        "Mens K4": points["gender_class_totals"].get("Mens K4", []),
        "Womens K4": points["gender_class_totals"].get("Womens K4", []),
    }
    points["trophy_tables"] = trophy_tables
    points["trophy_names"] = dict(NATIONALS_TROPHIES)
    points["level_columns"] = order_list(points["level_totals"], PREFERRED_LEVEL_ORDER) + list(trophy_tables)
    return points
