"""
Search server configuration.

Sources, highest priority first:
1. Explicit env file passed to load_settings()
2. .env.local in the working directory (local dev)
3. .env in the working directory
4. Process environment

Environment variables:
    SEARCH_MAX_RESULTS        top-K cap (default: 5)
    SEARCH_RELEVANCE_EPSILON  relevance tie threshold (default: 1e-6)
    SEARCH_REQUEST_WINDOW     RequestQueue capacity (default: 1440)
    LOG_LEVEL                 console log level (default: INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class SearchSettings(BaseModel):
    max_result_document_count: int = Field(
        default=5, ge=1, description="Maximum number of documents returned per query"
    )
    relevance_epsilon: float = Field(
        default=1e-6, gt=0.0, description="Relevances closer than this are ranked by rating"
    )
    request_window_size: int = Field(
        default=1440, ge=1, description="Number of recent requests kept by RequestQueue"
    )
    log_level: str = Field(default="INFO", description="Console logging level name")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def console_level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(cls) -> "SearchSettings":
        """Read settings from environment variables (unset ones keep defaults)"""
        env_names = {
            "max_result_document_count": "SEARCH_MAX_RESULTS",
            "relevance_epsilon": "SEARCH_RELEVANCE_EPSILON",
            "request_window_size": "SEARCH_REQUEST_WINDOW",
            "log_level": "LOG_LEVEL",
        }
        values = {
            field_name: os.getenv(env_name)
            for field_name, env_name in env_names.items()
            if os.getenv(env_name)
        }
        return cls(**values)


def load_settings(env_file: Optional[Union[str, Path]] = None) -> SearchSettings:
    """
    Load dotenv files and build validated settings.
    
    Args:
        env_file: Explicit env file; when None, .env.local then .env are tried
        
    Returns:
        SearchSettings
        
    Raises:
        pydantic.ValidationError: A variable holds an out-of-range value
    """
    if env_file is not None:
        load_dotenv(env_file, override=True)
        logger.debug(f"Loaded environment from: {env_file}")
    else:
        for candidate in (Path(".env.local"), Path(".env")):
            if candidate.exists():
                load_dotenv(candidate, override=True)
                logger.debug(f"Loaded environment from: {candidate}")
                break

    return SearchSettings.from_env()
