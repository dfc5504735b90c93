"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any, List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class TranslationSettings(BaseSettings):
    """External translation provider configuration"""

    provider_url: str = Field(
        default="https://api.mymemory.translated.net",
        description="Base URL of the MyMemory translation API"
    )
    user_agent: str = Field(default="Mozilla/5.0 (compatible; HelloMadurai/1.0)")
    # None keeps the HTTP client default of waiting indefinitely
    timeout_seconds: Optional[float] = Field(default=None, gt=0)

    model_config = {"env_prefix": "TRANSLATION_"}


class PushSettings(BaseSettings):
    """Firebase Cloud Messaging configuration"""

    service_account_path: Optional[str] = Field(
        default=None,
        description="Path to the Firebase Admin service account JSON file"
    )
    project_id: str = Field(default="hello-madurai")
    default_icon: str = Field(default="/icons/icon-192x192.png")
    badge: str = Field(default="/icons/badge-72x72.png")
    default_link: str = Field(default="/")
    content_broadcast_topic: Optional[str] = Field(
        default="all",
        description="Extra topic every content notification is also sent to"
    )

    # Web app configuration handed to the service worker
    web_api_key: str = Field(default="")
    web_auth_domain: str = Field(default="hello-madurai.firebaseapp.com")
    web_storage_bucket: str = Field(default="hello-madurai.firebasestorage.app")
    web_messaging_sender_id: str = Field(default="")
    web_app_id: str = Field(default="")

    @field_validator('content_broadcast_topic', mode='before')
    @classmethod
    def empty_topic_disables_broadcast(cls, v):
        """An empty value switches the broadcast copy off"""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def get_web_config(self) -> Dict[str, str]:
        """Firebase web configuration in the shape the JS SDK expects"""
        return {
            "apiKey": self.web_api_key,
            "authDomain": self.web_auth_domain,
            "projectId": self.project_id,
            "storageBucket": self.web_storage_bucket,
            "messagingSenderId": self.web_messaging_sender_id,
            "appId": self.web_app_id,
        }

    model_config = {"env_prefix": "PUSH_"}


class DatabaseSettings(BaseSettings):
    """Relational database configuration"""

    url: str = Field(default="sqlite:///./portal.db")
    echo: bool = Field(default=False)

    model_config = {"env_prefix": "DATABASE_"}


class SecuritySettings(BaseSettings):
    """Security and authentication configuration"""

    jwt_secret: str = Field(default="please-change-me")
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60, ge=1, le=60 * 24 * 7)
    admin_password_hash: Optional[str] = Field(
        default=None,
        description="bcrypt hash of the admin password; login is refused when unset"
    )
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: List[str] = Field(
        default_factory=lambda: ["GET", "POST"]
    )
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from environment variable or list"""
        if isinstance(v, str):
            origin_list = v.split(",")
            return [origin.strip() for origin in origin_list if origin.strip()]
        return v or ["*"]

    model_config = {"env_prefix": "SECURITY_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="Hello Madurai Portal")
    app_version: str = Field(default="1.0.0")
    environment: Environment = Field(default=Environment.DEVELOPMENT)
    debug: bool = Field(default=False)

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1, le=65535)
    reload: bool = Field(default=False)
    workers: int = Field(default=1, ge=1, le=16)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    # Nested Settings
    translation: TranslationSettings = Field(default_factory=TranslationSettings)
    push: PushSettings = Field(default_factory=PushSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    security: SecuritySettings = Field(default_factory=SecuritySettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def get_cors_config(self) -> Dict[str, Any]:
        """Get CORS configuration for FastAPI"""
        return {
            "allow_origins": self.security.cors_origins,
            "allow_credentials": self.security.cors_allow_credentials,
            "allow_methods": self.security.cors_allow_methods,
            "allow_headers": self.security.cors_allow_headers,
        }

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
