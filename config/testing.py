import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", "12345"),
    "database": os.getenv("DB_NAME", "attendance_test"),
}

DEPT = "ECA"
TZ = "Asia/Kolkata"
SIGNED_URL_EXPIRE_DAYS = 7

SUPABASE_URL = ""
SUPABASE_SERVICE_KEY = ""
STORAGE_BUCKET = "attendance-test"

SCRATCH_DIR = None

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
