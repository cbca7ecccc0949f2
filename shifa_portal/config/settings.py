"""
Application settings and configuration.
"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .clinic import ClinicConfig
from .storage import StorageConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shifa Portal"
    app_version: str = "1.0.0"
    debug: bool = False

    # Storage
    storage_path: str = "shifa_portal.db"
    storage_namespace: str = "shifa"
    seed_demo_data: bool = True

    # Clinic
    clinic_name: str = "Shifa Hospital"
    clinic_location: str = "Main Campus, Healthcare District"
    clinic_main_line: str = "+92-21-1234567"
    clinic_emergency_numbers: str = "911 or 1122"
    clinic_hours: str = "24/7 Emergency, 8 AM - 8 PM General"
    clinic_departments: List[str] = Field(
        default_factory=lambda: [
            "Emergency Medicine",
            "Cardiology",
            "Orthopedics",
            "Dermatology",
            "Neurology",
        ]
    )

    # Chat
    typing_delay_min: float = 1.0
    typing_delay_max: float = 2.0

    # Booking
    enforce_slot_conflicts: bool = False

    # Timezone
    timezone: str = "Asia/Karachi"

    # Logging
    log_level: str = "INFO"

    def storage_config(self) -> StorageConfig:
        """Build the storage configuration from these settings."""
        return StorageConfig(path=self.storage_path, namespace=self.storage_namespace)

    def clinic_config(self) -> ClinicConfig:
        """Build the clinic contact details used by the assistant."""
        return ClinicConfig(
            name=self.clinic_name,
            location=self.clinic_location,
            main_line=self.clinic_main_line,
            emergency_numbers=self.clinic_emergency_numbers,
            hours=self.clinic_hours,
            departments=list(self.clinic_departments),
        )


def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
