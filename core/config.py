# core/config.py
"""
Configuration management for the advisory core
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Dict, Any
import logging
from functools import lru_cache
from enum import Enum
from dotenv import load_dotenv
load_dotenv()

logger = logging.getLogger(__name__)

class Environment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"

class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"

class Settings(BaseSettings):
    """Application settings with validation"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AGRIGUARD_",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: Environment = Environment.DEVELOPMENT
    debug: bool = True

    # Reference advisory service
    api_title: str = "AgriGuard Advisory Service"
    api_version: str = "1.0.0"
    api_host: str = "0.0.0.0"
    api_port: int = 3002

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logger_levels: Dict[str, str] = {
        "uvicorn": "INFO",
        "uvicorn.access": "WARNING",
        "httpx": "WARNING",
        "agents": "INFO",
        "gateway": "INFO"
    }

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:4173"
    ]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]

    # Key-value cache
    cache_max_size: int = 1000

    # Agent Configurations
    intent_config: Dict[str, Any] = {
        "confidence_floor": 0.3,
        "exact_match_score": 1.0,
        "containment_score": 0.8,
        "overlap_weight": 0.6
    }

    # Demo constants, no agronomic derivation; override per deployment
    irrigation_config: Dict[str, Any] = {
        "over_irrigation_pct": 80.0,
        "saturation_pct": 90.0,
        "base_irrigation_mm": 15.0,
        "hot_day_threshold_c": 35.0,
        "hot_day_extra_mm": 10.0,
        "critical_multiplier": 1.5,
        "confidence_floor_pct": 60.0,
        "confidence_ceiling_pct": 98.0,
        "rain_forecast_wait_pct": None
    }

    alerts_config: Dict[str, Any] = {
        "consecutive_over_sweeps": 2
    }

    gateway_config: Dict[str, Any] = {
        "base_url": "http://localhost:3002/api",
        "timeout_s": 10.0,
        "retries": 2,
        "health_timeout_s": 3.0,
        "start_offline": False,
        "pending_key": "gateway:pending_requests"
    }

    def get_agent_config(self, agent_name: str) -> Dict[str, Any]:
        """Get configuration for specific agent"""
        config_map = {
            "intent": self.intent_config,
            "irrigation": self.irrigation_config,
            "alerts": self.alerts_config,
            "gateway": self.gateway_config
        }
        return dict(config_map.get(agent_name, {}))

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

# Validation functions
def validate_settings(settings: Settings) -> None:
    """Validate gateway and logging settings based on environment"""
    problems = []
    gateway = settings.gateway_config

    if not str(gateway.get("base_url", "")).startswith(("http://", "https://")):
        problems.append("gateway_config.base_url must be an http(s) URL")
    if float(gateway.get("timeout_s", 0)) <= 0:
        problems.append("gateway_config.timeout_s must be positive")
    if int(gateway.get("retries", 0)) < 0:
        problems.append("gateway_config.retries must not be negative")
    for name, level in settings.logger_levels.items():
        if str(level).upper() not in LogLevel.__members__:
            problems.append(f"logger_levels.{name} must be one of {list(LogLevel.__members__)}")

    if problems and settings.is_production:
        raise ValueError(f"Invalid settings in production: {'; '.join(problems)}")

    for problem in problems:
        logger.warning(f"⚠️  {problem} (defaults will be used where possible)")
