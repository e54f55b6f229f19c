from __future__ import annotations

from fastapi.testclient import TestClient


def _client(monkeypatch, tmp_path, data_dir) -> TestClient:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(f"paths:\n  data_dir: {data_dir}\n", encoding="utf-8")

    monkeypatch.setenv("FARSDATA_CONFIG", str(config_path))
    monkeypatch.setattr("farsdata.settings._CONFIG", None)

    from farsdata.api.app import create_app

    return TestClient(create_app())


def test_years_endpoint(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    resp = client.get("/years")
    assert resp.status_code == 200, resp.text
    assert resp.json() == [2013, 2014]


def test_summary_endpoint_reports_counts_and_invalid_years(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    resp = client.get("/summary", params=[("years", 2013), ("years", 2014), ("years", 1999)])
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["years"] == ["2013", "2014"]
    assert body["reason"] is None
    rows = {item["MONTH"]: item["counts"] for item in body["items"]}
    assert rows[1] == {"2013": 3, "2014": 1}
    assert rows[3] == {"2013": None, "2014": 1}
    assert [y["year"] for y in body["invalid_years"]] == ["1999"]
    assert body["invalid_years"][0]["code"] == "missing_file"


def test_summary_endpoint_without_data_sets_reason(monkeypatch, tmp_path) -> None:
    empty_dir = tmp_path / "empty"
    empty_dir.mkdir()
    client = _client(monkeypatch, tmp_path, empty_dir)
    resp = client.get("/summary")
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["items"] == []
    assert body["reason"]["code"] == "no_data"


def test_summary_csv_export(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    resp = client.get("/exports/summary.csv", params={"years": 2013})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.text.splitlines() == ["MONTH,2013", "1,3", "2,2"]


def test_state_accidents_endpoint_nulls_sentinels(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    resp = client.get("/states/42/accidents", params={"year": 2013, "columns": "ST_CASE"})
    assert resp.status_code == 200, resp.text
    items = resp.json()["items"]
    assert [item["ST_CASE"] for item in items] == [420001, 420002, 420003]
    assert items[1]["LATITUDE"] is None
    assert items[2]["LONGITUD"] is None


def test_state_endpoints_map_errors(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    missing = client.get("/states/42/accidents", params={"year": 1999})
    assert missing.status_code == 404
    invalid = client.get("/states/6/map", params={"year": 2013})
    assert invalid.status_code == 400
    assert "invalid STATE number: 6" in invalid.json()["detail"]


def test_state_map_endpoint_returns_html(monkeypatch, tmp_path, accident_dir) -> None:
    client = _client(monkeypatch, tmp_path, accident_dir)
    resp = client.get("/states/1/map", params={"year": 2014})
    assert resp.status_code == 200, resp.text
    assert resp.headers["content-type"].startswith("text/html")
    assert "scattergeo" in resp.text
