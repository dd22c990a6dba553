from typing import Literal
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    app_name: str = "Quote Intake"

    AIRTABLE_API_KEY: str = ""
    AIRTABLE_BASE_ID: str = ""
    AIRTABLE_TABLE_ID: str = ""
    AIRTABLE_API_URL: str = "https://api.airtable.com/v0"
    AIRTABLE_WEB_URL: str = "https://airtable.com"

    TEXTBELT_API_KEY: str = ""
    TEXTBELT_URL: str = "https://textbelt.com/text"
    NOTIFY_PHONE: str = ""

    RESEND_API_KEY: str = ""
    RESEND_URL: str = "https://api.resend.com/emails"
    NOTIFY_EMAIL: str = ""
    EMAIL_FROM: str = "WeMow760 <notifications@wemow760.com>"

    BUSINESS_NAME: str = "WeMow760"
    TIMEZONE: str = "America/Los_Angeles"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # "silent" hides collaborator outcomes from the submitter, "debug" echoes them
    RESPONSE_POLICY: Literal["silent", "debug"] = "silent"
    DEBUG_ENDPOINT_ENABLED: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"

settings = Settings()


def get_settings() -> Settings:
    return settings
