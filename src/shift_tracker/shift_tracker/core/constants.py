"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINUTES_IN_DAY = 24 * 60
DEFAULT_HOURLY_RATE = 16
DEFAULT_EMPLOYEE_ROLE = "Employee"
DEFAULT_DEPARTMENT = "Front of House"
DEFAULT_SESSION_HOURS = 12
DEFAULT_REPORT_DAYS = 7
