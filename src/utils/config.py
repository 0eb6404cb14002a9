"""Application configuration constants."""

from __future__ import annotations

APP_NAME = "TimeDistributionSlider"
APP_VERSION = "0.4.0"
ORG_NAME = "TimeDistributionSlider"

# Distribution defaults
DEFAULT_MIN_SHARE = 0.05  # 5% per item
DEFAULT_ENABLE_PUSH = True
DEFAULT_TOTAL_DURATION = 8 * 3600  # seconds (8 hours)
SHARE_SUM_TOLERANCE = 1e-4  # residual above this goes to the last item

# Pointer handling
SEPARATOR_HIT_PX = 18  # max distance from a separator that starts a drag

# Demo window ranges
MIN_SHARE_RANGE = (0.01, 0.20)
MIN_SHARE_STEP = 0.01
DURATION_RANGE = (3600, 86400)  # seconds
DURATION_STEP = 3600
ITEM_COUNT_MIN = 2
ITEM_COUNT_MAX = 50
DEFAULT_ITEM_COUNT = 3
DEFAULT_MAX_ITEMS = 20

# UI
SLIDER_HEIGHT = 24
HANDLE_DIAMETER = 20
LEGEND_DOT_SIZE = 8

# Segment palette (cycled by item index)
SEGMENT_COLORS = [
    (10, 132, 255),   # blue
    (48, 209, 88),    # green
    (255, 159, 10),   # orange
    (191, 90, 242),   # purple
    (102, 212, 207),  # mint
    (255, 69, 58),    # red
    (100, 210, 255),  # cyan
    (255, 55, 95),    # pink
]
