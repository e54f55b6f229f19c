from __future__ import annotations

import pandas as pd
import pytest

from farsdata.storage.datasets import accident_path, fars_read


def test_fars_read_missing_file_raises_with_path(tmp_path) -> None:
    missing = tmp_path / "accident_1999.csv.bz2"
    with pytest.raises(FileNotFoundError, match="does not exist") as excinfo:
        fars_read(missing)
    assert excinfo.value.filename == str(missing)
    assert not missing.exists()


def test_fars_read_returns_all_columns_unmodified(accident_dir) -> None:
    df = fars_read(accident_path(2013, accident_dir))
    assert list(df.columns) == ["STATE", "ST_CASE", "MONTH", "LATITUDE", "LONGITUD", "FATALS"]
    assert len(df) == 5
    # Sentinels are left as-is by the loader.
    assert df["LONGITUD"].max() == pytest.approx(999.9999)


def test_fars_read_is_repeatable(accident_dir) -> None:
    path = accident_path(2014, accident_dir)
    pd.testing.assert_frame_equal(fars_read(path), fars_read(path))
