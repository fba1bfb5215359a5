from collections import namedtuple

from .aca import aca_nationals_points_calc, aca_points_calc
from .barnes import barnes_full_points_calc, barnes_points_calc
from .divisions import points_by_division
from .fira import fira_points_calc
from .simple import simple_points_calc
from .sprints import sprints_full_points_calc, sprints_points_calc
from .wyandotte import hebda_points_calc, wyhi_points_calc


class UnknownScoringSystem(KeyError):
    pass


# key is used for stored selections, do not change it once published
ScoringSystem = namedtuple("ScoringSystem", ["key", "name", "calculate"])


def _barnes(results, scaled=True, coed_only=False):
    if coed_only:
        return barnes_full_points_calc(results, scaled, coed_teams_only_in_combined=True)
    return barnes_points_calc(results, scaled)


def _sprints(results, scaled=True, coed_only=False):
    if coed_only:
        return sprints_full_points_calc(results, coed_teams_only_in_combined=True)
    return sprints_points_calc(results)


SCORING_SYSTEMS = [
    ScoringSystem("Basic", "Basic Points", lambda results, **_: {"combined": simple_points_calc(results)}),
    ScoringSystem("Barnes", "Barnes Points", _barnes),
    ScoringSystem("FIRA", "FIRA Mitchell Points", lambda results, **_: fira_points_calc(results)),
    ScoringSystem("Sprints", "MSRA Sprints Points", _sprints),
    ScoringSystem("Hebda", "Hebda Cup Points", lambda results, **_: hebda_points_calc(results)),
    ScoringSystem("WyHi", "Wy-Hi Points", lambda results, **_: wyhi_points_calc(results)),
    ScoringSystem("ACA", "ACA Regatta", lambda results, **_: aca_points_calc(results)),
    ScoringSystem("ACANat", "ACA National Championships", lambda results, **_: aca_nationals_points_calc(results)),
    ScoringSystem("MSRA", "MSRA Team Divisions", lambda results, **_: points_by_division(results)),
]


def get_system(key):
    """Look up a scoring system by key, ignoring case."""
    for system in SCORING_SYSTEMS:
        if system.key.lower() == key.lower():
            return system
    raise UnknownScoringSystem(key)
