import os

from .config import db_config_from_env, env_flag, env_list, mail_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env()

ALLOWED_EMAILS = env_list("ALLOWED_EMAILS", ("ALLOWED_EMAIL_1", "ALLOWED_EMAIL_2"))
NOTIFY_RECIPIENTS = env_list("NOTIFY_RECIPIENTS") or ALLOWED_EMAILS

MAIL_CONFIG = mail_config_from_env()

PORT = int(os.getenv("PORT", "3000"))
SESSION_HOURS = int(os.getenv("SESSION_HOURS", "24"))

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
