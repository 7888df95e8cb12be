import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(key: str, default: int) -> int:
    """Get an integer environment variable or raise a readable error."""
    value = os.getenv(key)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{key} environment variable must be an integer, got {value!r}") from None


class Settings:
    SERVER_NAME: str = os.getenv("SERVER_NAME", "anthropic-docs-server")
    SERVER_VERSION: str = os.getenv("SERVER_VERSION", "1.0.0")

    # Server settings
    DEFAULT_PORT: int = _int_env("PORT", 3000)
    DEFAULT_HOST: str = os.getenv("HOST", "127.0.0.1")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Tool responses longer than this are truncated
    CHARACTER_LIMIT: int = _int_env("CHARACTER_LIMIT", 50_000)


settings = Settings()
