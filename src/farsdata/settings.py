from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


def project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _resolve_path(root: Path, value: str | Path) -> Path:
    path = Path(value)
    return path if path.is_absolute() else (root / path)


class AppSection(BaseModel):
    name: str = "farsdata"


class PathsSection(BaseModel):
    # Accident files are looked up relative to the working directory by default.
    data_dir: Path = Path(".")
    output_dir: Path = Path("outputs")


class FarsSection(BaseModel):
    latitude_sentinel: float = 90
    longitude_sentinel: float = 900


class PlottingSection(BaseModel):
    scope: str = "north america"
    marker_size: int = 3
    marker_color: str = "black"
    padding_degrees: float = 0.0


class CorsSection(BaseModel):
    allow_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://localhost:5173"]
    )


class ApiSection(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    cors: CorsSection = Field(default_factory=CorsSection)


class AppConfig(BaseModel):
    app: AppSection = Field(default_factory=AppSection)
    paths: PathsSection = Field(default_factory=PathsSection)
    fars: FarsSection = Field(default_factory=FarsSection)
    plotting: PlottingSection = Field(default_factory=PlottingSection)
    api: ApiSection = Field(default_factory=ApiSection)

    def resolve_paths(self, root: Optional[Path] = None) -> "AppConfig":
        base = Path.cwd() if root is None else root
        updated_paths = self.paths.model_copy(
            update={
                "data_dir": _resolve_path(base, self.paths.data_dir),
                "output_dir": _resolve_path(base, self.paths.output_dir),
            }
        )
        return self.model_copy(update={"paths": updated_paths})


def _maybe_load_dotenv() -> None:
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return

    load_dotenv()


def load_config(config_path: str | Path | None = None) -> AppConfig:
    _maybe_load_dotenv()

    root = project_root()
    candidate = config_path or os.getenv("FARSDATA_CONFIG", "configs/config.yaml")
    path = _resolve_path(root, candidate)
    if not path.exists():
        path = root / "configs/config.example.yaml"

    data: dict[str, Any] = {}
    if path.exists():
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return AppConfig.model_validate(data).resolve_paths()


_CONFIG: AppConfig | None = None


def get_config() -> AppConfig:
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = load_config()
    return _CONFIG
