"""
Configuration management using Pydantic Settings.

Environment variables:
- DATABASE_URL: SQLAlchemy database URL for the design store
- AUTOSAVE_DELAY_SECONDS: Trailing delay used to coalesce editor saves
- EXPORT_COMPONENT_NAME: Function name of the generated React component
- EXPORT_INDENT: Indent level of exported markup inside the component
- CLASS_ATTRIBUTE: Attribute used for utility classes (className / class)
- LOG_LEVEL: Logging level for scripts
"""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database Configuration
    database_url: str = Field(default="sqlite:///design_store.db")
    design_list_limit: int = Field(default=50)
    default_design_name_prefix: str = Field(default="Design")

    # Editor
    autosave_delay_seconds: float = Field(default=0.5)

    # Code Export
    export_component_name: str = Field(default="GeneratedComponent")
    export_indent: int = Field(default=2)
    class_attribute: str = Field(default="className")

    # Logging
    log_level: str = Field(default="INFO")

    def get_export_config(self) -> dict:
        """Get code export configuration as dictionary."""
        return {
            'component_name': self.export_component_name,
            'indent': self.export_indent,
            'class_attribute': self.class_attribute,
        }


# Global settings instance
settings = Settings()
