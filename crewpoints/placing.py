from typing import Dict, List

from .models import Standing

DIRECTIONS = ("asc", "desc")


def gen_places(values, direction="asc"):
    """Return the place of each value, 1 being first.

    The input does not need to be sorted. Equal values share a place and the
    next distinct value takes its position in the full ordering, so two
    entries tied for second both get 2 and the one after them gets 4.

    gen_places([1, 4, 2, 3, 4, 2], "desc") -> [6, 1, 4, 3, 1, 4]
    """
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be 'asc' or 'desc', not {direction!r}")
    if not values:
        return []

    order = sorted(range(len(values)), key=lambda i: values[i], reverse=direction == "desc")

    places = [0] * len(values)
    prev_value = None
    prev_place = 0
    for pos, index in enumerate(order, start=1):
        if prev_value is not None and values[index] == prev_value:
            places[index] = prev_place
        else:
            places[index] = pos
        prev_value = values[index]
        prev_place = places[index]
    return places


def assign_places(standings, digits=None):
    """Fill in descending places on an already sorted list of standings.

    With ``digits`` the points are rounded before comparing so float noise
    does not split a tie.
    """
    values = [s.points if digits is None else round(s.points, digits) for s in standings]
    for standing, place in zip(standings, gen_places(values, "desc")):
        standing.place = place
    return standings


def summarize_points(points: Dict[str, float], drop_zero=False, digits=None) -> List[Standing]:
    """Turn a {name: points} map into a ranked list of standings."""
    standings = [
        Standing(name=name, points=value)
        for name, value in sorted(points.items(), key=lambda item: item[1], reverse=True)
    ]
    if drop_zero:
        standings = [s for s in standings if s.points != 0]
    return assign_places(standings, digits)


def summarize_buckets(buckets: Dict[str, Dict[str, float]], **kwargs) -> Dict[str, List[Standing]]:
    return {key: summarize_points(points, **kwargs) for key, points in buckets.items()}
