from pathlib import Path

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"
BUNDLE_JSON = DATA_DIR / "snowfall-data.json"

# Station attribution written into the bundle
DEFAULT_SOURCE = "NOAA Winter Park Station (USC00059175)"
DEFAULT_ELEVATION_FT = 9100
UNITS = "inches"

# NOAA GHCN-Daily CSV export columns
GHCN_DATE_COLUMN = "DATE"
GHCN_SNOW_COLUMN = "SNOW"
GHCN_DEPTH_COLUMN = "SNWD"

# Reported for amounts too small to measure
TRACE_SENTINEL = "T"

# Ski season runs Aug 1 - Jul 31
SEASON_START_MONTH = 8
SEASON_START_DAY = 1
MAX_DAY_OF_SEASON = 365

# Seasons with fewer recorded days are left out of the bundle
MIN_SEASON_DAYS = 30

# Valid start years for season labels
MIN_LABEL_YEAR = 1000
MAX_LABEL_YEAR = 9999
INVALID_LABEL = "Invalid"

# Season color gradient (HSL): newest darkest, oldest lightest
SEASON_HUE = 210
SEASON_SATURATION = 70
MIN_LIGHTNESS = 25
MAX_LIGHTNESS = 65

# Chart axis padding
X_AXIS_PADDING_DAYS = 10
Y_AXIS_HEADROOM = 0.10

# Series emphasis
DEFAULT_BORDER_WIDTH = 2
HIGHLIGHT_BORDER_WIDTH = 4
DIMMED_ALPHA = 0.3

# Snowfall amounts are reported to 0.1 inch
SNOWFALL_DECIMALS = 1
