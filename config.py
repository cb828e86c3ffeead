import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", True))
    API_PORT = data.get("API_PORT", 8080)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Tokens
    ACCESS_JWT_SECRET = data.get("ACCESS_JWT_SECRET", "dev-access-secret-change-in-production")
    REFRESH_JWT_SECRET = data.get("REFRESH_JWT_SECRET", "dev-refresh-secret-change-in-production")
    ACCESS_TOKEN_TTL_MINUTES = int(data.get("ACCESS_TOKEN_TTL_MINUTES", 15))
    REFRESH_TOKEN_TTL_DAYS = int(data.get("REFRESH_TOKEN_TTL_DAYS", 7))

    # Password reset
    RESET_TOKEN_TIMEOUT_MINUTES = int(data.get("RESET_TOKEN_TIMEOUT_MINUTES", 10))
    PASSWORD_MIN_LENGTH = int(data.get("PASSWORD_MIN_LENGTH", 8))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:5173")

    # Mailer
    MAILER_HOST = data.get("MAILER_HOST", "localhost")
    MAILER_PORT = int(data.get("MAILER_PORT", 587))
    MAILER_USER = data.get("MAILER_USER", "")
    MAILER_PASSWORD = data.get("MAILER_PASSWORD", "")
    MAILER_START_TLS = bool(data.get("MAILER_START_TLS", True))
    MAILER_FROM = data.get("MAILER_FROM", "no-reply@localhost")
    MAILER_SENDER_NAME = data.get("MAILER_SENDER_NAME", "The Auth Team")
    MAILER_TIMEOUT = int(data.get("MAILER_TIMEOUT", 10))
