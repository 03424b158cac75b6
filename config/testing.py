import os

from .config import db_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="12345")

ALLOWED_EMAILS = ["manager@example.com", "director@example.com"]
NOTIFY_RECIPIENTS = ALLOWED_EMAILS

MAIL_CONFIG = {
    "host": "localhost",
    "port": 1025,
    "username": "",
    "password": "",
    "from_email": "signoff@example.com",
    "from_name": "Langley Pharmacy",
}

PORT = int(os.getenv("PORT", "3000"))
SESSION_HOURS = 24

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
