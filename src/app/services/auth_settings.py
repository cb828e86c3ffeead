from datetime import timedelta

from pydantic import BaseModel


class AuthSettings(BaseModel):
    """
    Configuration injected into the auth use cases.

    reset_token_timeout bounds both the lifetime of a reset link and the
    cooldown between a password change (or reset request) and the next
    reset request.
    """

    access_token_secret: str
    refresh_token_secret: str
    access_token_ttl: timedelta = timedelta(minutes=15)
    refresh_token_ttl: timedelta = timedelta(days=7)
    jwt_algorithm: str = "HS256"

    reset_token_timeout: timedelta = timedelta(minutes=10)
    password_min_length: int = 8

    frontend_url: str = "http://localhost:5173"
    mail_sender_name: str = "The Auth Team"

    @classmethod
    def from_config(cls, config) -> "AuthSettings":
        return cls(
            access_token_secret=config.ACCESS_JWT_SECRET,
            refresh_token_secret=config.REFRESH_JWT_SECRET,
            access_token_ttl=timedelta(minutes=config.ACCESS_TOKEN_TTL_MINUTES),
            refresh_token_ttl=timedelta(days=config.REFRESH_TOKEN_TTL_DAYS),
            reset_token_timeout=timedelta(minutes=config.RESET_TOKEN_TIMEOUT_MINUTES),
            password_min_length=config.PASSWORD_MIN_LENGTH,
            frontend_url=config.FRONTEND_URL,
            mail_sender_name=config.MAILER_SENDER_NAME,
        )
