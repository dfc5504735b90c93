"""
Configuration loader utility for environment-specific settings.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .settings import Settings, Environment

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Utility class for loading environment-specific configurations"""

    @staticmethod
    def env_file_for(environment: str) -> Path:
        """Path of the dotenv file holding overrides for an environment"""
        return Path(f".env.{Environment(environment.lower()).value}")

    @staticmethod
    def load_environment_config(environment: Optional[str] = None) -> Settings:
        """
        Load configuration for the specified environment.

        Args:
            environment: Target environment (development, staging, production, testing)
                        If None, uses ENVIRONMENT env var or defaults to development

        Returns:
            Settings instance with environment-specific configuration
        """
        if environment is None:
            environment = os.getenv("ENVIRONMENT", "development")

        env_file = ConfigLoader.env_file_for(environment)

        if env_file.exists():
            return Settings(_env_file=str(env_file), environment=environment)

        logger.warning(f"Environment file {env_file} not found, using default settings")
        return Settings(environment=environment)

    @staticmethod
    def get_available_environments() -> list[str]:
        """Get list of available environment configurations"""
        names = []
        for env_file in Path(".").glob(".env.*"):
            name = env_file.name.replace(".env.", "")
            if name in {env.value for env in Environment}:
                names.append(name)
        return sorted(names)

    @staticmethod
    def validate_environment_config(environment: str) -> bool:
        """
        Check that an environment name is known and its settings load.

        Production additionally requires a non-default JWT secret and a
        configured admin password hash.
        """
        try:
            settings = ConfigLoader.load_environment_config(environment)
        except ValueError as e:
            logger.error(f"Invalid configuration for '{environment}': {e}")
            return False

        if settings.is_production():
            if settings.security.jwt_secret == "please-change-me":
                logger.error("SECURITY_JWT_SECRET must be set in production")
                return False
            if not settings.security.admin_password_hash:
                logger.error("SECURITY_ADMIN_PASSWORD_HASH must be set in production")
                return False
        return True


def load_config_for_environment(environment: Optional[str] = None) -> Settings:
    """Convenience function to load configuration for an environment"""
    return ConfigLoader.load_environment_config(environment)
