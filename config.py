"""
Environment configuration and logging setup shared by the scripts and tasks.
"""

import os
import logging
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConfigurationError(RuntimeError):
    """A required environment value is missing or invalid."""


class Config:
    def __init__(self):
        self.private_key: Optional[str] = os.getenv("PRIVATE_KEY")
        self.fuji_rpc_url: Optional[str] = os.getenv("AVALANCHE_FUJI_RPC_URL")
        self.nft_api_key: Optional[str] = os.getenv("NFT_API_KEY")
        self.secrets_url: Optional[str] = os.getenv("S3_SECRET_URL")
        # Overrides the request source shipped with the handler
        self.source_path: Optional[str] = os.getenv("FUNCTIONS_SOURCE_PATH") or None
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE", "functions.log")

    def require(self, name: str) -> str:
        """Return the environment value `name` or raise if it is unset."""
        value = os.getenv(name)
        if not value:
            raise ConfigurationError(
                f"{name} not provided - check your environment variables"
            )
        return value


def configure_logging(config: Optional[Config] = None):
    """Log to both a file and the console, as every entry point does."""
    config = config or Config()
    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
