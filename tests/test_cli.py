"""
Tests for results loading and the command line
"""

import json

import pytest
from crewpoints.cli import main
from crewpoints.io import load_results_from_json, to_jsonable
from crewpoints.models import ResultsFormatError, Standing


EXPORT = {
    "regattaInfo": {"Title": "Spring Sprints", "json": ""},
    "results": [
        {
            "Event": "1 Womens 8+",
            "EventNum": "1",
            "entries": [
                {"Crew": "Mount Baker", "Place": 1},
                {"Crew": "Lakeside", "Place": 2},
                {"Crew": "Slow Poke", "Place": 0},
            ],
        }
    ],
}


@pytest.fixture
def export_path(tmp_path):
    path = tmp_path / "results.json"
    path.write_text(json.dumps(EXPORT))
    return str(path)


class TestIO:

    def test_load(self, export_path):
        results = load_results_from_json(export_path)
        assert results.regatta_info.name == "Spring Sprints"
        assert [e.crew for e in results.results[0].entries] == ["Mount Baker", "Lakeside", "Slow Poke"]

    def test_load_bad_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{")
        with pytest.raises(ResultsFormatError):
            load_results_from_json(str(path))

    def test_to_jsonable(self):
        value = {"clubs": {"FC": {"b", "a"}}, "totals": [Standing("FC", 9, 1)]}
        assert to_jsonable(value) == {
            "clubs": {"FC": ["a", "b"]},
            "totals": [{"name": "FC", "points": 9, "place": 1}],
        }


class TestMain:

    def test_basic_json(self, export_path, capsys):
        assert main(["--input", export_path, "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert output == {
            "combined": [
                {"name": "Mount Baker", "points": 24, "place": 1},
                {"name": "Lakeside", "points": 16, "place": 2},
            ]
        }

    def test_barnes_table(self, export_path, capsys):
        assert main(["--input", export_path, "--system", "barnes"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Barnes Points")
        assert "1. Mount Baker - 30" in out
        assert "2. Lakeside - 12" in out
        assert "3. Slow Poke - 0" in out

    def test_unscaled_and_coed_flags(self, export_path, capsys):
        assert main(["--input", export_path, "--system", "Barnes", "--unscaled", "--coed-only", "--json"]) == 0
        output = json.loads(capsys.readouterr().out)
        assert "womens_sweep" in output
        assert output["combined"][0]["points"] == 0

    def test_unknown_system(self, export_path):
        assert main(["--input", export_path, "--system", "Olympic"]) == 1

    def test_missing_file(self, tmp_path):
        assert main(["--input", str(tmp_path / "nope.json")]) == 1

    def test_bad_export(self, tmp_path):
        path = tmp_path / "results.json"
        path.write_text(json.dumps({"regattaInfo": {}}))
        assert main(["--input", str(path)]) == 1

    def test_bad_regatta_config(self, tmp_path):
        export = dict(EXPORT, regattaInfo={"json": "{oops"})
        path = tmp_path / "results.json"
        path.write_text(json.dumps(export))
        assert main(["--input", str(path), "--system", "ACA"]) == 1
