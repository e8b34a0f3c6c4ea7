"""Internal constants shared across the library."""

import re

LANG_ENGLISH = "eng"
LANG_WELSH = "cym"

# Top-level key holding the observation array in StatsWales JSON exports.
STATS_JSON_RECORDS_KEY = "value"

# Literal year range meaning "import every year".
ALL_YEARS: tuple[int, int] = (0, 0)

LANG_CODE_PATTERN = re.compile(r"[A-Za-z]{3}")
YEAR_PATTERN = re.compile(r"\d{4}")

# ------------------------------------------------------------------
# Text output markers
# ------------------------------------------------------------------

UNNAMED = "Unnamed"
NO_MEASURES = "<no measures>"
NO_DATA = "<no data>"
