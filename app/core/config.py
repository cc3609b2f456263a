from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    BUSINESS_NAME: str = "Guardian Pressure Washing"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CAL_COM_PUBLIC_URL: str = "https://cal.com/guardian-pressure-washing"
    CAL_COM_OVERLAY_CALENDAR: bool = True

    PROMO_CODES_ENABLED: bool = True
    UPSELL_ENABLED: bool = True


settings = Settings()
