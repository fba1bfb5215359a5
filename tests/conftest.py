"""
Pytest fixtures for crewpoints tests: small regattas built in memory
"""
import json

import pytest

from crewpoints.models import Entry, EventResult, RegattaInfo, Results


def _entry(crew, place=None, stroke="", penalty="", time=""):
    return Entry(crew=crew, stroke=stroke, place=place, adj_time=time, penalty_code=penalty)


def _event(num, name, entries, info=""):
    return EventResult(event=f"{num} {name}", event_num=str(num), event_info=info, entries=list(entries))


def _results(*events, config=None):
    blob = json.dumps(config) if config is not None else ""
    return Results(results=list(events), regatta_info=RegattaInfo(name="Test Regatta", json=blob))


@pytest.fixture
def make_entry():
    return _entry


@pytest.fixture
def make_event():
    return _event


@pytest.fixture
def make_results():
    return _results


@pytest.fixture
def rowing_regatta():
    """Five rowing events: one heat, one exhibition crew, B boats and non-scoring teams.

    Barnes (scaled) totals: Mount Baker 56, Green Lake Crew 29.4,
    Lakeside School 17.5, Slow Poke 0, Everett Rowing 0.
    """
    return _results(
        _event(1, "Womens Varsity 8+ Final", [
            _entry("Mount Baker", 1),
            _entry("Green Lake Crew", 2),
            _entry("Lakeside School", 3),
        ]),
        _event(2, "Mens Varsity 2x", [
            _entry("Green Lake Crew", 1),
            _entry("Mount Baker A", 2),
            _entry("Mount Baker B", 3),
            _entry("Lakeside School", 4),
            _entry("Slow Poke"),
        ]),
        _event(3, "Womens Novice 4+", [
            _entry("Mount Baker", 1),
            _entry("Green Lake Crew", 2),
        ]),
        _event(4, "Mens Varsity 8+ H1", [
            _entry("Lakeside School", 1),
            _entry("Everett Rowing", 2),
        ]),
        _event(5, "Womens 1x", [
            _entry("Illegally Fast Composite", penalty="Exhib"),
            _entry("Lakeside School", 1),
            _entry("Mount Baker", 2),
        ]),
        _event(6, "Mens 4+", [
            _entry("Empty"),
        ]),
    )


@pytest.fixture
def canoe_regatta():
    """ACA canoe/kayak regatta.

    Club totals: False Creek 28, BHAM 12.5, IND 5, SCKC 3.5, ZZC 0.
    """
    return _results(
        _event(1, "Womens K1 500 U16 (Juvenile) Final", [
            _entry("Scoggins, Ellie", 1, stroke="BHAM", time="02:17.302"),
            _entry("So, Veronica", 2, stroke="False Creek", time="02:19.110"),
            _entry("Doe, Jane", 3, stroke="Indep", time="02:25.000"),
            _entry("Late, Kate", stroke="SCKC"),
        ]),
        _event(2, "Mens K2 1000 Junior Final", [
            _entry("A, Al; B, Bob", 1, stroke="False Creek; False Creek"),
            _entry("C, Cy; D, Dan", 2, stroke="SCKC; BHAM"),
        ]),
        _event(3, "Mens K4 5000 Senior", [
            _entry("E;F;G;H", 1, stroke="False Creek"),
        ]),
        _event(4, "Mens K1 200 Junior H1", [
            _entry("Z, Zed", 1, stroke="ZZC"),
        ]),
        _event(5, "Womens K1 500 Exhibition", [
            _entry("X, Xena", 1, stroke="XKC"),
        ]),
    )
