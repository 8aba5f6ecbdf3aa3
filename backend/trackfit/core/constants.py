"""Shared application constants.

Chart styling and user-facing messages live here so the page template,
the chart builder and the API agree on them.
"""

# Target line: red, dashed, thin
TARGET_LINE_COLOR = "#e45858"
# Recorded weights: blue, solid, with markers
WEIGHT_LINE_COLOR = "#3b82f6"

# d3 time format for x-axis ticks, e.g. '4-21'
CHART_TICK_FORMAT = "%-m-%d"

WEIGHT_UNIT = "kg"

# Slider step on the entry form (kg)
FORM_WEIGHT_STEP = 0.1

MSG_SAVED = "Weight saved successfully"
MSG_LIST_FAILED = "Failed to fetch weight history"
MSG_SAVE_FAILED = "Failed to save weight"
MSG_DATE_REQUIRED = "Please enter a date."
