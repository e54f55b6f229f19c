from __future__ import annotations

from pathlib import Path

from farsdata.plotting.state_map import map_spec_from_config
from farsdata.settings import AppConfig, load_config


def test_default_config_resolves_against_working_directory(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = AppConfig().resolve_paths()
    assert config.paths.data_dir == tmp_path
    assert config.paths.output_dir == tmp_path / "outputs"
    assert config.fars.longitude_sentinel == 900


def test_load_config_reads_yaml_from_env(tmp_path, monkeypatch) -> None:
    data_dir = tmp_path / "fars"
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        f"paths:\n  data_dir: {data_dir}\nplotting:\n  marker_size: 5\n  padding_degrees: 0.25\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("FARSDATA_CONFIG", str(config_path))

    config = load_config()
    assert config.paths.data_dir == data_dir
    assert config.plotting.marker_size == 5

    spec = map_spec_from_config(config)
    assert spec.marker_size == 5
    assert spec.padding_degrees == 0.25
    assert spec.latitude_sentinel == 90


def test_load_config_falls_back_when_file_missing(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("FARSDATA_CONFIG", str(tmp_path / "nope.yaml"))
    config = load_config()
    assert config.app.name == "farsdata"
    assert isinstance(config.paths.data_dir, Path)


def test_fars_section_reads_sentinels_from_yaml(tmp_path, monkeypatch) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(
        "fars:\n  latitude_sentinel: 80\n  longitude_sentinel: 800\n", encoding="utf-8"
    )
    monkeypatch.setenv("FARSDATA_CONFIG", str(config_path))

    config = load_config()
    assert set(type(config.fars).model_fields) == {"latitude_sentinel", "longitude_sentinel"}
    spec = map_spec_from_config(config)
    assert spec.latitude_sentinel == 80
    assert spec.longitude_sentinel == 800
