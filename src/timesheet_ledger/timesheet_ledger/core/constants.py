"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Friday shifts close one hour earlier.
FRIDAY_EARLY_MINUTES = 60

# Early-leave quota: each incident up to 1.5h, at most 2 incidents per month.
QUOTA_EARLY_LEAVE_MINUTES = 90
QUOTA_EARLY_LEAVE_COUNT = 2

DEFAULT_GRACE_MINUTES = 10

# Two-digit years below the cutoff belong to the 2000s.
TWO_DIGIT_YEAR_CUTOFF = 50

# Single-punch days: before this hour the punch counts as check-in.
SINGLE_PUNCH_NOON_HOUR = 12
