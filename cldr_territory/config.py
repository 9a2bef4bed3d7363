import os

from pydantic_settings import BaseSettings

_data_dir = os.path.join(os.path.dirname(__file__), "data")


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Locale used when a caller passes none (CLDR's own default is "en-001")
    DEFAULT_LOCALE: str = "en-001"

    # Locales whose name tables are built at startup, canonical "-" form
    KNOWN_LOCALES: list[str] = ["en", "en-001", "pt", "bs", "fr", "de", "es", "ja"]

    # Shipped CLDR snapshots (containment, styles, measurement, figures)
    DATA_DIR: str = _data_dir


settings = Settings()
