# contact_relay/core/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr
from typing import List, Optional

DEFAULT_ORIGINS = ["https://cybersoft.az", "https://www.cybersoft.az"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    api_title: str = Field(default="CyberSoft Contact API", alias="API_TITLE")

    # Comma-separated; unset means DEFAULT_ORIGINS
    allowed_origins: Optional[str] = Field(default=None, alias="ALLOWED_ORIGINS")

    # Bearer credential for the mail-sending endpoint
    resend_api_key: Optional[SecretStr] = Field(default=None, alias="RESEND_API_KEY")

    mail_api_url: str = Field(
        default="https://cybersoftbackend.cybersoftmmc.workers.dev/api/contact",
        alias="MAIL_API_URL",
    )
    mail_from: str = Field(
        default="CyberSoft Contact Form <noreply@cybersoft.az>",
        alias="MAIL_FROM",
    )
    mail_to: str = Field(default="sales@cybersoft.az", alias="MAIL_TO")

    # Seconds; None leaves the deadline to the hosting platform
    mail_api_timeout: Optional[float] = Field(default=None, alias="MAIL_API_TIMEOUT")

    def origin_allow_list(self) -> List[str]:
        if self.allowed_origins is None:
            return list(DEFAULT_ORIGINS)
        origins = [o.strip() for o in self.allowed_origins.split(",") if o.strip()]
        return origins or list(DEFAULT_ORIGINS)

settings = Settings()
