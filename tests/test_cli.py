import json

import pytest

from light_aware_routing.main import load_candidates, main


@pytest.fixture
def candidates_file(tmp_path, origin, move):
    street = [move(origin, east_m=50 * i).to_dict() for i in range(11)]
    dark = [move(origin, north_m=800, east_m=50 * i).to_dict() for i in range(11)]
    data = [
        {"path": dark, "distance_km": 0.5, "duration_minutes": 6, "duration_text": "6 mins"},
        {"path": street, "distance_km": 0.5, "duration_minutes": 9},
    ]
    path = tmp_path / "candidates.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_load_candidates(candidates_file):
    candidates = load_candidates(candidates_file)

    assert len(candidates) == 2
    assert candidates[0].duration_text == "6 mins"
    assert len(candidates[1].path) == 11


def test_load_candidates_rejects_non_list(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"path": []}))
    with pytest.raises(ValueError, match="JSON list"):
        load_candidates(str(path))


def test_load_candidates_rejects_non_object_item(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1]))
    with pytest.raises(ValueError, match="JSON object"):
        load_candidates(str(path))


def test_load_candidates_rejects_negative_distance(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([{"path": [], "distance_km": -1, "duration_minutes": 3}]))
    with pytest.raises(ValueError, match="#0"):
        load_candidates(str(path))


def test_json_output(capsys, streetlights_geojson, candidates_file):
    code = main(["--streetlights", streetlights_geojson, "--candidates", candidates_file, "--json"])

    assert code == 0
    variants = {v["id"]: v for v in json.loads(capsys.readouterr().out)}
    assert variants["fastest"]["duration_minutes"] == 6
    assert variants["most-lit"]["duration_minutes"] == 9
    assert variants["balanced"]["duration_minutes"] == 6
    assert variants["most-lit"]["light_score"] == pytest.approx(6.5)


def test_text_output_and_map(capsys, tmp_path, streetlights_geojson, candidates_file):
    map_path = tmp_path / "routes.html"

    code = main(["--streetlights", streetlights_geojson, "--candidates", candidates_file,
                 "--map", str(map_path)])

    out = capsys.readouterr().out
    assert code == 0
    assert "Most Well Lit route" in out
    assert map_path.exists()


def test_missing_streetlights_scores_neutral(capsys, tmp_path, candidates_file):
    code = main(["--streetlights", str(tmp_path / "none.geojson"), "--candidates", candidates_file,
                 "--json"])

    out = capsys.readouterr().out
    assert code == 0
    variants = json.loads(out[out.index("["):])
    assert all(v["light_score"] == 5 for v in variants)


def test_unreadable_candidates(capsys, streetlights_geojson, tmp_path):
    code = main(["--streetlights", streetlights_geojson, "--candidates", str(tmp_path / "missing.json")])
    assert code == 1
    assert "Could not load route candidates" in capsys.readouterr().out


@pytest.mark.parametrize("content", ["[1]", "[[0.5, 6]]", '[{"path": [[45.0, -75.0]], "duration_minutes": 3}]'])
def test_non_object_candidates(capsys, streetlights_geojson, tmp_path, content):
    path = tmp_path / "odd.json"
    path.write_text(content)

    code = main(["--streetlights", streetlights_geojson, "--candidates", str(path)])

    assert code == 1
    assert "Invalid candidate #0" in capsys.readouterr().out


def test_empty_candidate_list(capsys, streetlights_geojson, tmp_path):
    path = tmp_path / "empty.json"
    path.write_text("[]")
    assert main(["--streetlights", streetlights_geojson, "--candidates", str(path)]) == 1


def test_start_requires_end(streetlights_geojson):
    with pytest.raises(SystemExit):
        main(["--streetlights", streetlights_geojson, "--start", "Parliament Hill"])


def test_directions_without_key(capsys, monkeypatch, streetlights_geojson):
    monkeypatch.delenv("GOOGLE_MAPS_API_KEY", raising=False)
    code = main(["--streetlights", streetlights_geojson, "--start", "a", "--end", "b"])
    assert code == 1
    assert "GOOGLE_MAPS_API_KEY" in capsys.readouterr().out
