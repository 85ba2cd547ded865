import os

from plant_attendance.core import constants

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "multi_plant"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

MAX_REPORT_DAYS = int(os.getenv("MAX_REPORT_DAYS", constants.MAX_REPORT_DAYS))
MAX_DAILY_REPORT_DAYS = int(os.getenv("MAX_DAILY_REPORT_DAYS", constants.MAX_DAILY_REPORT_DAYS))
