"""LUIS client configuration"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

from luis_client.models.schemas import LuisModel


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Empty variables (e.g. `LUIS_MODEL_ID=`) count as unset.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Model configuration
    luis_model_id: Optional[str] = None
    luis_subscription_key: Optional[str] = None
    luis_endpoint: Optional[str] = None
    luis_api_version: str = "v2.0"
    luis_threshold: float = 0.0

    # HTTP
    luis_timeout: float = 20.0

    # Default query options, unset unless given
    luis_log: Optional[bool] = None
    luis_spell_check: Optional[bool] = None
    luis_staging: Optional[bool] = None
    luis_verbose: Optional[bool] = None
    luis_timezone_offset: Optional[float] = None
    bing_spell_check_subscription_key: Optional[str] = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    def to_luis_model(self) -> LuisModel:
        """Build the LUIS model described by these settings."""
        return LuisModel(
            model_id=self.luis_model_id,
            subscription_key=self.luis_subscription_key,
            uri_base=self.luis_endpoint,
            api_version=self.luis_api_version,
            threshold=self.luis_threshold,
            log=self.luis_log,
            spell_check=self.luis_spell_check,
            staging=self.luis_staging,
            verbose=self.luis_verbose,
            timezone_offset=self.luis_timezone_offset,
            bing_spell_check_subscription_key=self.bing_spell_check_subscription_key,
        )


settings = Settings()
