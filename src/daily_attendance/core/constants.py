"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_DEPT = "ECA"
DEFAULT_TIMEZONE = "Asia/Kolkata"
DEFAULT_SIGNED_URL_EXPIRE_DAYS = 7
DEFAULT_STORAGE_BUCKET = "attendance"
DEFAULT_SHEET_HISTORY_LIMIT = 30

# Provider caps a single write batch at 500 mutations; stay under it.
PROVIDER_BATCH_LIMIT = 500
BATCH_LIMIT = 400

SHEETS_PREFIX = "attendance_sheets"
SHEET_NAME = "Attendance"
XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
