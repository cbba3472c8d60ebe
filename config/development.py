import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

DEPT = os.getenv("DEPT", "ECA")
TZ = os.getenv("TZ", "Asia/Kolkata")
# Validated by RunSettings so a bad value is reported like any other config error
SIGNED_URL_EXPIRE_DAYS = os.getenv("SIGNED_URL_EXPIRE_DAYS", "7")

SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "attendance")

# Local directory for the generated workbook before upload (default: system temp dir)
SCRATCH_DIR = os.getenv("SCRATCH_DIR") or None

DEBUG = True

# If enabled, the app applies database/schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also seed the demo timetable and roster on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
