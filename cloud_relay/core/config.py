import os
from typing import List, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    # AWS Textract (OCR provider)
    aws_region: Optional[str] = Field(default=os.getenv("AWS_REGION"))
    aws_access_key_id: Optional[str] = Field(default=os.getenv("AWS_ACCESS_KEY_ID"))
    aws_secret_access_key: Optional[str] = Field(default=os.getenv("AWS_SECRET_ACCESS_KEY"))

    # OpenAI Images (image-generation provider)
    openai_api_key: Optional[str] = Field(default=os.getenv("OPENAI_API_KEY"))

    app_env: str = Field(default=os.getenv("APP_ENV", "development"))
    app_debug: bool = Field(default=os.getenv("APP_DEBUG", "false").lower() == "true")
    app_host: str = Field(default=os.getenv("APP_HOST", "0.0.0.0"))
    app_port: int = Field(default=int(os.getenv("APP_PORT", "8000")))

    # base64 images need a larger JSON body ceiling than the usual defaults
    max_body_size_mb: int = Field(default=int(os.getenv("MAX_BODY_SIZE_MB", "10")))
    cors_allow_origins: str = Field(default=os.getenv("CORS_ALLOW_ORIGINS", "*"))

    log_level: str = Field(default=os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = Field(default=os.getenv("LOG_FORMAT", "text"))

    @field_validator("log_level")
    def validate_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_format(cls, v):
        if v.lower() not in ("text", "json"):
            raise ValueError("Log format must be 'text' or 'json'")
        return v.lower()

    @property
    def max_body_size_bytes(self) -> int:
        return self.max_body_size_mb * 1024 * 1024

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    @property
    def missing_provider_settings(self) -> List[str]:
        """Names of provider variables that are unset or empty."""
        required = {
            "AWS_REGION": self.aws_region,
            "AWS_ACCESS_KEY_ID": self.aws_access_key_id,
            "AWS_SECRET_ACCESS_KEY": self.aws_secret_access_key,
            "OPENAI_API_KEY": self.openai_api_key,
        }
        return [name for name, value in required.items() if not value]

    @property
    def textract_configured(self) -> bool:
        return not any(name.startswith("AWS_") for name in self.missing_provider_settings)

    @property
    def openai_configured(self) -> bool:
        return bool(self.openai_api_key)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra fields from environment


settings = Settings()
