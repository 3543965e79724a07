"""
Configuration management for the tracker.
Handles loading settings from environment variables and .env files.
"""

import math
import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv
from loguru import logger

from hubez_tracker.exceptions import ConfigError


DEFAULT_TRACKING_URL = "https://www.hub-ez.com/Tracking/GetTracking"
DEFAULT_TELEGRAM_API_URL = "https://api.telegram.org"


@dataclass
class TrackerConfig:
    """Main configuration class for the tracker."""
    
    # Telegram
    telegram_bot_token: str = ""
    telegram_bot_user: str = ""  # destination chat id
    telegram_api_url: str = DEFAULT_TELEGRAM_API_URL
    
    # Tracking endpoint
    tracking_url: str = DEFAULT_TRACKING_URL
    
    # Polling
    poll_interval: float = 1.0  # seconds
    
    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    
    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "TrackerConfig":
        """Load configuration from environment variables."""
        
        if env_file:
            load_dotenv(env_file)
        else:
            for env_path in [".env", "config.env"]:
                if Path(env_path).exists():
                    load_dotenv(env_path)
                    break
        
        try:
            poll_interval = float(os.getenv("POLL_INTERVAL", "1.0"))
        except ValueError as e:
            raise ConfigError(f"POLL_INTERVAL must be a number: {e}") from e
        
        return cls(
            # Telegram
            telegram_bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
            telegram_bot_user=os.getenv("TELEGRAM_BOT_USER", ""),
            telegram_api_url=os.getenv("TELEGRAM_API_URL", DEFAULT_TELEGRAM_API_URL),
            
            # Tracking endpoint
            tracking_url=os.getenv("HUBEZ_TRACKING_URL", DEFAULT_TRACKING_URL),
            
            # Polling
            poll_interval=poll_interval,
            
            # Logging
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        )
    
    def validate(self) -> list[str]:
        """Validate configuration and return list of errors."""
        errors = []
        
        if not self.telegram_bot_token:
            errors.append("TELEGRAM_BOT_TOKEN not set")
        if not self.telegram_bot_user:
            errors.append("TELEGRAM_BOT_USER not set")
        if not math.isfinite(self.poll_interval):
            errors.append("POLL_INTERVAL must be a finite number")
        elif self.poll_interval < 0:
            errors.append("POLL_INTERVAL must not be negative")
        
        try:
            logger.level(self.log_level)
        except ValueError:
            errors.append(f"LOG_LEVEL {self.log_level!r} is not a known level")
        
        return errors


def init_config(
    env_file: Optional[str] = None,
    poll_interval: Optional[float] = None,
    log_level: Optional[str] = None,
) -> TrackerConfig:
    """
    Load configuration from the environment and validate it.
    
    Args:
        env_file: Optional .env file to load
        poll_interval: Override for POLL_INTERVAL
        log_level: Override for LOG_LEVEL
        
    Raises:
        ConfigError: if a required setting is missing or invalid
    """
    config = TrackerConfig.from_env(env_file)
    
    if poll_interval is not None:
        config.poll_interval = poll_interval
    if log_level:
        config.log_level = log_level.upper()
    
    errors = config.validate()
    if errors:
        raise ConfigError("; ".join(errors))
    
    return config
