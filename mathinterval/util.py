"""Package-wide constants for mathinterval.

These are the fixed defaults used by parsing and formatting.
"""

# Template used by Interval.to_string() and str(interval).
# Each placeholder receives the interval itself; the spec after ":" picks
# the endpoint and numeric style (see IntervalFormatter).
DEFAULT_TEMPLATE = "{0:A} {0:B}"

# Fractional digits for plain and percentage numerals
PRECISION = 1

DEFAULT_LOCALE = "en"

# Bracket notation: "[a, b)", "(1,10]", "[ ,5]"
INTERVAL_PATTERN = r"^\s*([\[(])\s*([^,]*?)\s*,\s*([^,]*?)\s*([\])])\s*$"
