# gst_invoicing/core/config.py

from decimal import Decimal

from pydantic import Field, AliasChoices
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Read env from container + optionally from files
    model_config = SettingsConfigDict(
        env_file=(".env", ".env.docker"),
        extra="ignore",
        case_sensitive=False,
    )

    # App
    ENVIRONMENT: str = Field(default="dev", validation_alias=AliasChoices("ENVIRONMENT", "environment"))
    APP_NAME: str = Field(default="gst_invoicing", validation_alias=AliasChoices("APP_NAME", "app_name"))
    LOG_LEVEL: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    DEBUG: bool = Field(default=False, validation_alias=AliasChoices("DEBUG", "debug"))

    # Infrastructure
    DATABASE_URL: str = Field(
        default="postgresql+asyncpg://postgres:postgres@db:5432/gst_invoicing",
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
    )
    DATABASE_SSL: bool = Field(default=False, validation_alias=AliasChoices("DATABASE_SSL", "database_ssl"))

    # Invoicing defaults (applied when a shop has no settings row yet)
    DEFAULT_INVOICE_PREFIX: str = Field(
        default="INV",
        validation_alias=AliasChoices("DEFAULT_INVOICE_PREFIX", "default_invoice_prefix"),
    )
    INVOICE_NUMBER_WIDTH: int = Field(
        default=4,
        ge=1,
        validation_alias=AliasChoices("INVOICE_NUMBER_WIDTH", "invoice_number_width"),
    )
    DEFAULT_GST_RATE: Decimal = Field(
        default=Decimal("18"),
        ge=0,
        le=100,
        validation_alias=AliasChoices("DEFAULT_GST_RATE", "default_gst_rate"),
    )
    DEFAULT_PLACE_OF_SUPPLY: str = Field(
        default="Maharashtra",
        validation_alias=AliasChoices("DEFAULT_PLACE_OF_SUPPLY", "default_place_of_supply"),
    )


settings = Settings()
