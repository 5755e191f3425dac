import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/smms")
    SECRET_KEY = os.getenv("SESSION_SECRET", "aVerySecretKeyForSessions")

    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", "uploads")
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 16 * 1024 * 1024))

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            "CORS_ORIGINS", "http://localhost:3001,http://127.0.0.1:3001,null"
        ).split(",")
        if origin.strip()
    ]

    # Session cookie, one day
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = _as_bool(os.getenv("SESSION_COOKIE_SECURE"))
    PERMANENT_SESSION_LIFETIME = timedelta(days=1)

    BCRYPT_LOG_ROUNDS = int(os.getenv("BCRYPT_LOG_ROUNDS", 12))

    SEED_ON_STARTUP = _as_bool(os.getenv("SEED_ON_STARTUP"), default=True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    PORT = int(os.getenv("PORT", 3001))
