from __future__ import annotations

# Columns read from each accident file. Everything else is passed through untouched.
REQUIRED_COLUMNS: dict[str, tuple[str, ...]] = {
    "summary": ("MONTH",),
    "map": ("STATE", "LATITUDE", "LONGITUD"),
}

# FARS encodes unknown coordinates as out-of-range values (e.g. 99.9999, 999.9999).
LATITUDE_SENTINEL = 90.0
LONGITUDE_SENTINEL = 900.0
