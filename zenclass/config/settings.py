"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from datetime import datetime
from typing import List, Tuple

from dotenv import load_dotenv

load_dotenv()


def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)


def split_csv_env(key: str, default: str) -> List[str]:
    """Comma separated environment variable as a list"""
    raw = os.getenv(key, default).strip()
    if raw == "*":
        return ["*"]
    return [part.strip() for part in raw.split(",") if part.strip()]


# Database
MONGODB_URI: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017/zenclassdb")
DB_NAME: str = os.getenv("DB_NAME", "zenclassdb")
MONGO_CLIENT_CONFIG = {
    "serverSelectionTimeoutMS": safe_int_env("MONGO_SERVER_SELECTION_TIMEOUT_MS", "30000"),
    "connectTimeoutMS": 30000,
    "socketTimeoutMS": 30000,
    "maxPoolSize": 50,
    "retryReads": True,
}

# Server
HOST: str = os.getenv("HOST", "0.0.0.0")
PORT: int = safe_int_env("PORT", "3000")
CORS_ALLOW_ORIGINS: List[str] = split_csv_env("CORS_ALLOW_ORIGINS", "*")

# Logging
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR: str = os.getenv("LOG_DIR", "logs")
LOG_FILE_NAME = "zenclass.log"
MAX_LOG_SIZE = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Reporting window (Business Configuration), naive UTC like stored dates
REPORT_WINDOW_START = datetime(2020, 10, 15, 0, 0, 0)
REPORT_WINDOW_END = datetime(2020, 10, 31, 23, 59, 59, 999000)
REPORT_WINDOW: Tuple[datetime, datetime] = (REPORT_WINDOW_START, REPORT_WINDOW_END)

OCTOBER = 10
MENTEES_COUNT_THRESHOLD = 15

# Enumerations
ATTENDANCE_STATUSES = ("present", "absent")
TASK_STATUSES = ("pending", "submitted")
