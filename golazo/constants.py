"""Constants used across golazo.

This module defines shared constants to ensure consistency.
"""

# Animation timing (seconds)
SPINNER_TICK_INTERVAL = 0.07  # ~14 fps, keeps keyboard input responsive
MAIN_VIEW_CHECK_DELAY = 1.5  # Loading phase shown when a view is entered

# Frame geometry fallbacks
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24

# Layout reservations
SPINNER_HEIGHT = 3  # Always reserved to prevent layout shift
MIN_AVAILABLE_HEIGHT = 10
PANEL_FRAME_ROWS = 2
SEPARATOR_WIDTH = 1
LEFT_PANEL_PERCENT = 35
MIN_LEFT_WIDTH = 25
MIN_RIGHT_WIDTH = 35

# Spinner
DEFAULT_SPINNER_WIDTH = 20
SPINNER_FALLBACK_TEXT = "Loading..."

# Panel titles
PANEL_LIVE_MATCHES = "Live Matches"
PANEL_FINISHED_MATCHES = "Finished"
PANEL_UPCOMING_MATCHES = "Upcoming"
PANEL_MATCH_INFO = "Match Info"
PANEL_LIVE_UPDATES = "Live Updates"

# Empty states
EMPTY_SELECT_MATCH = "Select a match to view details"
EMPTY_NO_LIVE_MATCHES = "No live matches right now"
EMPTY_NO_FINISHED_MATCHES = "No finished matches found"
EMPTY_NO_UPCOMING_MATCHES = "No upcoming matches scheduled for today"
EMPTY_NO_LIVE_UPDATES = "No updates yet"
DATE_RANGE_HINT = "Try selecting a different date range (h/l keys)"

# Stats view date ranges (days)
DATE_RANGES = (1, 3)
