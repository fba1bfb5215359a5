from typing import List

from .events import is_a_final, num_seats_from_name
from .models import Results, Standing
from .placing import summarize_points
from .points import EXHIB_PENALTY_CODE, simple_points


def simple_points_calc(results: Results) -> List[Standing]:
    """
    Seat-count team points: 3 points per seat for first, 2 for second and
    1 for third in each A final. Entries are scored by crew name as entered.
    """
    team_points = {}
    for event in results.results:
        if not is_a_final(event.event, event.event_num):
            continue  # heats, time trials, lower finals
        seats = num_seats_from_name(event.event)
        for entry in event.entries:
            if entry.penalty_code == EXHIB_PENALTY_CODE:
                continue
            points = simple_points(seats, entry.place)
            if not points:
                continue
            team_points[entry.crew] = team_points.get(entry.crew, 0) + points

    return summarize_points(team_points)
