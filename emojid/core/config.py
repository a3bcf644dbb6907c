from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Union

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    APP_NAME: str = "EmojiID API"
    
    # CORS Configuration - comma-separated list accepted from the environment
    ALLOWED_ORIGINS: Union[List[str], str] = []
    
    # Rate Limiting Configuration
    RATE_LIMIT_ENABLED: bool = True
    
    # Default rate limit (requests per minute)
    DEFAULT_RATE_LIMIT: str = "100/minute"
    
    # Endpoint rate limits
    GENERATE_RATE_LIMIT: str = "60/minute"
    PARSE_RATE_LIMIT: str = "120/minute"
    
    # Request limits
    MAX_BATCH_SIZE: int = 100
    MAX_CUSTOM_ALPHABET_SIZE: int = 65536
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_ID_EVENTS: bool = True
    AUDIT_LOG_DIR: Optional[str] = None
    
    @field_validator('ALLOWED_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        return v
    
    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return v
    
    class Config:
        env_file = ".env"
        extra = "ignore"  # Ignore extra environment variables

settings = Settings()
