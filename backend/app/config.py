"""Configuration management for the application."""
from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, env_parse_none_str="None")
    
    # API Configuration
    api_title: str = "Airdrop Balance Checker API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api"
    
    # CORS Configuration
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]
    
    # Airdrop balance API
    airdrop_api_url: str = "https://api.commonwealth4.com/airdrop_balance"
    airdrop_request_timeout: Optional[float] = None  # seconds; None waits for the slowest lookup
    max_concurrent_lookups: Optional[PositiveInt] = None  # None = one request per wallet at once
    
    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json or console


settings = Settings()
