"""
Tests for seat-count and Barnes team points
Tests: simple_points_calc, Barnes combined/gender tables, scaling, co-ed combined
"""

import pytest
from crewpoints.barnes import barnes_full_points_calc, barnes_points_calc, barnes_points_impl
from crewpoints.simple import simple_points_calc


def _by_name(standings):
    return {s.name: s for s in standings}


class TestSimplePoints:
    """3-2-1 points per seat in A finals"""

    def test_totals(self, rowing_regatta):
        standings = simple_points_calc(rowing_regatta)
        assert [(s.name, s.points, s.place) for s in standings] == [
            ("Mount Baker", 38, 1),
            ("Green Lake Crew", 30, 2),
            ("Lakeside School", 11, 3),
            ("Mount Baker A", 4, 4),
            ("Mount Baker B", 2, 5),
        ]

    def test_shared_place(self, make_results, make_event, make_entry):
        results = make_results(
            make_event(1, "Mens 8+", [make_entry("Mount Baker", 1), make_entry("Everett", 2)]),
            make_event(2, "Womens 8+", [make_entry("Everett", 1), make_entry("Mount Baker", 2)]),
        )
        standings = simple_points_calc(results)
        assert [s.place for s in standings] == [1, 1]
        assert {s.points for s in standings} == {40}

    def test_exhibition_entry_does_not_score(self, make_results, make_event, make_entry):
        """An exhibition crew keeps its place but earns nothing"""
        results = make_results(
            make_event(1, "Mens 8+", [
                make_entry("Composite", 1, penalty="Exhib"),
                make_entry("Mount Baker", 2),
            ]),
        )
        standings = simple_points_calc(results)
        assert [(s.name, s.points, s.place) for s in standings] == [("Mount Baker", 16, 1)]


class TestBarnesPoints:
    """Combined, men's and women's standings"""

    def test_scaled_combined(self, rowing_regatta):
        combined = barnes_points_calc(rowing_regatta, use_scaled_events=True)["combined"]
        assert [s.name for s in combined] == [
            "Mount Baker",
            "Green Lake Crew",
            "Lakeside School",
            "Slow Poke",
            "Everett Rowing",
        ]
        assert [s.points for s in combined] == pytest.approx([56, 29.4, 17.5, 0, 0])
        assert [s.place for s in combined] == [1, 2, 3, 4, 4]

    def test_gender_tables(self, rowing_regatta):
        tables = barnes_points_calc(rowing_regatta, use_scaled_events=True)
        assert set(tables) == {"combined", "mens", "womens"}
        assert _by_name(tables["womens"])["Mount Baker"].points == pytest.approx(44)
        assert _by_name(tables["mens"])["Mount Baker"].points == pytest.approx(12)
        assert tables["mens"][0].name == "Green Lake Crew"

    def test_unscaled(self, rowing_regatta):
        combined = _by_name(barnes_points_calc(rowing_regatta)["combined"])
        assert combined["Mount Baker"].points == pytest.approx(64)
        assert combined["Green Lake Crew"].points == pytest.approx(31)

    def test_placeholders_and_exhibition_not_listed(self, rowing_regatta):
        combined = _by_name(barnes_points_calc(rowing_regatta)["combined"])
        assert "Empty" not in combined
        assert "Illegally Fast Composite" not in combined
        assert "Mount Baker B" not in combined

    def test_full_tables(self, rowing_regatta):
        tables = barnes_full_points_calc(rowing_regatta, use_scaled_events=True)
        assert set(tables) == {"combined", "mens_scull", "womens_scull", "mens_sweep", "womens_sweep"}
        womens_scull = _by_name(tables["womens_scull"])
        assert womens_scull["Lakeside School"].points == 10
        assert womens_scull["Mount Baker"].points == 2
        assert _by_name(tables["mens_scull"])["Green Lake Crew"].points == 15

    def test_every_team_in_every_table(self, rowing_regatta):
        team_points = barnes_points_impl(rowing_regatta)
        for totals in team_points.values():
            assert set(totals) == {"combined", "mens_scull", "womens_scull", "mens_sweep", "womens_sweep"}

    def test_coed_only_combined(self, make_results, make_event, make_entry):
        results = make_results(
            make_event(1, "Womens 2x", [make_entry("Mount Baker", 1), make_entry("Holy Names", 2)]),
            make_event(2, "Mens 2x", [make_entry("Mount Baker", 2), make_entry("Seattle Prep", 1)]),
        )
        tables = barnes_full_points_calc(results, coed_teams_only_in_combined=True)
        combined = _by_name(tables["combined"])
        assert combined["Mount Baker"].points == 18
        assert combined["Holy Names"].points == 0
        assert combined["Seattle Prep"].points == 0
        assert _by_name(tables["womens_scull"])["Holy Names"].points == 3
        assert _by_name(tables["mens_scull"])["Seattle Prep"].points == 15
