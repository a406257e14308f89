# dubai_horizon/config.py
"""Configuration management for the Dubai Horizon API."""
import os
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def get_data_dir():
    """Directory holding the JSON collections."""
    return os.getenv("DATA_DIR", os.path.join(BASE_DIR, "data"))


def get_upload_dir():
    """Directory where uploaded destination images are written."""
    return os.getenv("UPLOAD_DIR", os.path.join(BASE_DIR, "uploads"))


def get_public_base_url():
    return os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")


def get_admin_email():
    """The single email address treated as the admin identity."""
    return os.getenv("ADMIN_EMAIL", "admin@dubaihorizon.example")


def get_session_duration():
    return int(os.getenv("SESSION_DURATION_SECONDS", 24 * 60 * 60))


def get_reset_token_duration():
    return int(os.getenv("RESET_TOKEN_DURATION_SECONDS", 60 * 60))


def get_booking_webhook_url():
    """Outbound booking notification URL; empty disables the webhook."""
    return os.getenv("BOOKING_WEBHOOK_URL", "")


def get_openai_chat_model():
    return os.getenv("OPENAI_CHAT_MODEL", "gpt-4.1")


def get_default_currency():
    return os.getenv("DEFAULT_CURRENCY", "AED")


def get_log_level():
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_port():
    return int(os.getenv("PORT", 8000))
