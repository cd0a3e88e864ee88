from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Number of decimal digits used for reals in emitted objects
    real_precision: int = 6

    # Color space used when a gradient does not declare one
    default_color_space: str = "DeviceRGB"

    # Whether gradients extend beyond their start & end points by default
    default_extend: bool = True

    model_config = SettingsConfigDict(
        env_prefix="PDFGRADIENTS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
