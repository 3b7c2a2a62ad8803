from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="IDQR_", env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO", description="Root log level")
    scanner_config_path: str = Field(default="config/scanner.yaml", description="Camera/scan settings for the CV shell")
    api_prefix: str = Field(default="/api", description="Prefix for the parse routes")

settings = Settings()
