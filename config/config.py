import os


def env_flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


def env_list(name: str, fallbacks: tuple[str, ...] = ()) -> list[str]:
    """Read a comma-separated env var, or the single-value fallback vars."""
    raw = os.environ.get(name)
    if raw:
        return [item.strip() for item in raw.split(",") if item.strip()]
    return [os.environ[f] for f in fallbacks if os.environ.get(f)]


def db_config_from_env(*, default_password: str = "") -> dict:
    return {
        "host": os.environ.get("DB_HOST", "localhost"),
        "port": int(os.environ.get("DB_PORT", "3306")),
        "user": os.environ.get("DB_USER", "root"),
        "password": os.environ.get("DB_PASSWORD", default_password),
        "database": os.environ.get("DB_NAME", "pharmacy_signoff"),
    }


def mail_config_from_env() -> dict:
    # EMAIL_USER / EMAIL_PASS are what the gmail deployment already sets
    username = os.environ.get("SMTP_USERNAME") or os.environ.get("EMAIL_USER", "")
    return {
        "host": os.environ.get("SMTP_HOST", "smtp.gmail.com"),
        "port": int(os.environ.get("SMTP_PORT", "587")),
        "username": username,
        "password": os.environ.get("SMTP_PASSWORD") or os.environ.get("EMAIL_PASS", ""),
        "from_email": os.environ.get("SMTP_FROM_EMAIL", username),
        "from_name": os.environ.get("SMTP_FROM_NAME", "Langley Pharmacy"),
    }
