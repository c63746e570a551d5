from pathlib import Path

# -----------------------------
# DATASET CONFIG
# -----------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
DATASET_PATH = BASE_DIR / "data" / "dataset.csv"

# First N columns are identifiers, everything after them is a metric
ID_COLUMN_COUNT = 3
NAME_COL = "state"
ABBR_COL = "st_abbr"

# Ordered metric columns. The first half is offered on the x-axis,
# the second half on the y-axis.
METRIC_COLUMNS = [
    "per_below_poverty",
    "median_income",
    "median_age",
    "per_no_coverage",
    "per_everyday_smoker",
    "per_obsess",
]

METRIC_LABELS = {
    "per_below_poverty": "In Poverty (%)",
    "median_income": "Household Income (Median)",
    "median_age": "Age (Median)",
    "per_no_coverage": "Lacks Health Care (%)",
    "per_everyday_smoker": "Smokers (%)",
    "per_obsess": "Obese (%)",
}

TOOLTIP_PREFIXES = {
    "per_below_poverty": "Poverty: ",
    "median_income": "Median Income: ",
    "median_age": "Median Age: ",
    "per_no_coverage": "Lacks Coverage: ",
    "per_everyday_smoker": "Everyday Smokers: ",
    "per_obsess": "Obesity: ",
}

METRIC_UNITS = {
    "per_below_poverty": "%",
    "median_income": "",
    "median_age": "",
    "per_no_coverage": "%",
    "per_everyday_smoker": "%",
    "per_obsess": "%",
}

# -----------------------------
# CHART CONFIG
# -----------------------------
SVG_MAX_WIDTH = 960
SVG_MAX_HEIGHT = 500
MARGIN = {"top": 20, "right": 40, "bottom": 80, "left": 100}

TRANSITION_MS = 1800
TRANSITION_EASING = "cubic-in-out"

MARKER_RADIUS = 9
MARKER_FILL = "#a3c2c2"
AXIS_TICKS = 10

# Room left around the figure for the clickable axis labels
LABEL_GUTTER = 110
MIN_SVG_WIDTH = 320
MIN_SVG_HEIGHT = 240

# -----------------------------
# SERVER CONFIG
# -----------------------------
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8050


def drawable_size(svg_width, svg_height):
    """Chart area inside the margins for a given viewport size."""
    width = svg_width - MARGIN["left"] - MARGIN["right"]
    height = svg_height - MARGIN["top"] - MARGIN["bottom"]
    return max(width, 1), max(height, 1)
