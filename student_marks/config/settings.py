"""Configuration settings - Configuration Layer (Environment Separated)"""
import os
from typing import Dict
from dotenv import load_dotenv

load_dotenv()

def safe_int_env(key: str, default: str) -> int:
    """Safely convert environment variable to int"""
    try:
        return int(os.getenv(key, default))
    except ValueError:
        return int(default)

def safe_bool_env(key: str, default: str) -> bool:
    """Read a true/false style environment variable"""
    value = os.getenv(key, default).strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return default.strip().lower() in {"1", "true", "yes", "on"}

# Database Configuration
DB_URL: str = os.getenv("DB_URL", "mongodb://localhost:27017")
DB_NAME: str = os.getenv("DB_NAME", "students_db")
STUDENTS_COLLECTION: str = os.getenv("STUDENTS_COLLECTION", "students")

# MongoDB connection configuration
MONGO_CLIENT_CONFIG: Dict = {
    'maxPoolSize': safe_int_env("MONGO_MAX_POOL_SIZE", "50"),
    'minPoolSize': safe_int_env("MONGO_MIN_POOL_SIZE", "5"),
    'connectTimeoutMS': 10000,
    'serverSelectionTimeoutMS': 10000,
    'waitQueueTimeoutMS': 10000,
    'socketTimeoutMS': 60000,
    'retryWrites': True,
    'retryReads': True,
    'w': 1
}

# Scoring Configuration
SCORE_BEST_STUDENT = safe_int_env("SCORE_BEST_STUDENT", "80")

# Students with too few marks are deleted by the few-marks query
PURGE_FEW_MARKS = safe_bool_env("PURGE_FEW_MARKS", "true")

# Logging Configuration
class LogConfig:
    LOG_DIR = os.getenv("LOG_DIR", os.path.join(os.getcwd(), "logs"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()
    LOG_FILE_ENABLED = safe_bool_env("LOG_FILE_ENABLED", "true")
    MAX_LOG_SIZE = safe_int_env("MAX_LOG_SIZE", str(10 * 1024 * 1024))  # 10 MB
    BACKUP_COUNT = safe_int_env("LOG_BACKUP_COUNT", "5")
