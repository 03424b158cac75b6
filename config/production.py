import os

from .config import db_config_from_env, env_flag, env_list, mail_config_from_env

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

ALLOWED_EMAILS = env_list("ALLOWED_EMAILS", ("ALLOWED_EMAIL_1", "ALLOWED_EMAIL_2"))
NOTIFY_RECIPIENTS = env_list("NOTIFY_RECIPIENTS") or ALLOWED_EMAILS

MAIL_CONFIG = mail_config_from_env()

PORT = int(os.getenv("PORT", "3000"))
SESSION_HOURS = int(os.getenv("SESSION_HOURS", "24"))

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
