"""Constants and defaults.

Note: API messages live here so controllers and services agree on wording.
"""

APP_NAME = "Employee Attendance Tracker"
APP_VERSION = "1.0.0"

DEFAULT_POOL_NAME = "attendance_pool"
DEFAULT_POOL_SIZE = 5
DEFAULT_POOL_TIMEOUT = 30.0

MSG_FIELDS_REQUIRED = "All fields are required"
MSG_INVALID_STATUS = "Status must be Present or Absent"
MSG_INVALID_DATE = "Date must be a valid date in YYYY-MM-DD format"
MSG_DUPLICATE = "Attendance already recorded for this employee on the selected date"
MSG_RECORDED = "Attendance recorded successfully"
MSG_DELETED = "Record deleted successfully"
MSG_NOT_FOUND = "Record not found"

MSG_FETCH_FAILED = "Failed to fetch attendance records"
MSG_RECORD_FAILED = "Failed to record attendance"
MSG_DELETE_FAILED = "Failed to delete record"
MSG_FILTER_FAILED = "Failed to filter attendance records"
MSG_DB_FAILED = "Database connection failed"
MSG_INTERNAL_ERROR = "Internal server error"
