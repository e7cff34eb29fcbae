"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

PF_RATE = 0.12
FULL_DAY_HOURS = 8
DEFAULT_WORKING_DAYS = 22
MONTHS_PER_YEAR = 12

MIN_PAYROLL_YEAR = 2020
MAX_PAYROLL_YEAR = 2030
