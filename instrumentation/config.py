import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Device/app snapshot reported with every event
    APP_NAME: str = "default_app"
    APP_VERSION: str = ""
    OS_NAME: str = ""
    OS_VERSION: str = ""
    NATIVE_APP_TYPE: str = "Native"
    MOBILE_SDK_VERSION: str = ""
    DEVICE_MODEL: str = ""
    DEVICE_ID: str = ""
    CLIENT_ID: str = ""

    # When disabled the manager reports no device attributes and builds fail
    DEVICE_ATTRIBUTES_ENABLED: bool = True

    LOG_LEVEL: str = "INFO"

    class Config:
        # If you have a .env file, settings can be loaded from it
        env_prefix = "INSTRUMENTATION_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def configure_logging(config: Settings = settings) -> logging.Logger:
    """Applies the configured level to the package logger and returns it."""
    package_logger = logging.getLogger("instrumentation")
    package_logger.setLevel(config.LOG_LEVEL.upper())
    return package_logger
