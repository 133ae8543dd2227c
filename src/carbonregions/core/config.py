# src/carbonregions/core/config.py

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

ELECTRICITY_MAPS_API_KEY_ENV_VAR = "ELECTRICITY_MAPS_API_KEY"
WATT_TIME_USER_ENV_VAR = "WATT_TIME_USER"
WATT_TIME_PASSWORD_ENV_VAR = "WATT_TIME_PASSWORD"

DEFAULT_SIGNAL_TYPE = "co2_moer"

SECRETS_DIR = "/etc/carbonregions/secrets"


class Config:
    """
    Handles the application's configuration by loading values from environment variables.
    """

    def __init__(self):
        # --- Provider credentials ---
        self.ELECTRICITY_MAPS_API_KEY = self._get_secret(ELECTRICITY_MAPS_API_KEY_ENV_VAR)
        self.WATT_TIME_USER = self._get_secret(WATT_TIME_USER_ENV_VAR)
        self.WATT_TIME_PASSWORD = self._get_secret(WATT_TIME_PASSWORD_ENV_VAR)

    @staticmethod
    def _get_secret(key: str, default: str = None) -> str:
        """
        Retrieves a secret from a file (Docker secret/volume) or falls back to environment variable.

        Raises:
            PermissionError: If the secret file exists but cannot be read due to permissions.
            IOError: If the secret file exists but cannot be read due to I/O errors.
        """
        secret_file = f"{SECRETS_DIR}/{key}"
        if os.path.exists(secret_file):
            try:
                with open(secret_file, "r") as f:
                    value = f.read().strip()
                    logging.getLogger(__name__).debug(f"Loaded secret '{key}' from {secret_file}")
                    return value
            except PermissionError as e:
                raise PermissionError(
                    f"Secret file '{secret_file}' exists but cannot be read due to permission denied. "
                    f"Please check file permissions or run with appropriate privileges."
                ) from e
            except (IOError, OSError) as e:
                raise IOError(
                    f"Secret file '{secret_file}' exists but cannot be read: {e}. "
                    f"Please check the file integrity and system resources."
                ) from e
        return os.getenv(key, default)

    # Non-secret settings are properties so their values are resolved at
    # access time rather than bound once at import.

    @property
    def INTER_ROW_DELAY(self) -> float:
        return float(os.getenv("INTER_ROW_DELAY", "1.0"))

    @property
    def WATT_TIME_SIGNAL_TYPE(self) -> str:
        return os.getenv("WATT_TIME_SIGNAL_TYPE", DEFAULT_SIGNAL_TYPE)

    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "INFO")

    # --- HTTP variables ---
    @property
    def DEFAULT_TIMEOUT_CONNECT(self) -> float:
        return float(os.getenv("HTTP_CONNECT_TIMEOUT", "10"))

    @property
    def DEFAULT_TIMEOUT_READ(self) -> float:
        return float(os.getenv("HTTP_READ_TIMEOUT", "30"))

    @property
    def USER_AGENT(self) -> str:
        from .. import __version__

        return os.getenv("USER_AGENT", f"carbonregions/{__version__}")

    # --- Endpoints ---
    @property
    def NOMINATIM_SEARCH_URL(self) -> str:
        return os.getenv("NOMINATIM_SEARCH_URL", "https://nominatim.openstreetmap.org/search")

    @property
    def ELECTRICITY_MAPS_ZONE_URL(self) -> str:
        return os.getenv(
            "ELECTRICITY_MAPS_ZONE_URL",
            "https://api-access.electricitymaps.com/free-tier/carbon-intensity/latest",
        )

    @property
    def WATT_TIME_LOGIN_URL(self) -> str:
        return os.getenv("WATT_TIME_LOGIN_URL", "https://api.watttime.org/login")

    @property
    def WATT_TIME_REGION_URL(self) -> str:
        return os.getenv("WATT_TIME_REGION_URL", "https://api.watttime.org/v3/region-from-loc")

    def validate_instance(self):
        if self.INTER_ROW_DELAY < 0:
            raise ValueError("INTER_ROW_DELAY must be greater than or equal to 0.")
        if self.DEFAULT_TIMEOUT_CONNECT <= 0 or self.DEFAULT_TIMEOUT_READ <= 0:
            raise ValueError("HTTP_CONNECT_TIMEOUT and HTTP_READ_TIMEOUT must be positive.")


class PipelineSettings(BaseModel):
    """
    Explicit settings handed to the enrichment pipeline.

    Credentials are optional here; the pipeline checks them during its
    bootstrap phase so the error can name the missing variable.
    """

    api_key: str | None = Field(None, description="Electricity Maps API key.")
    watt_time_user: str | None = Field(None, description="WattTime account username.")
    watt_time_password: str | None = Field(None, description="WattTime account password.")
    inter_row_delay: float = Field(1.0, ge=0, description="Pause in seconds after every row.")
    signal_type: str = Field(DEFAULT_SIGNAL_TYPE, description="WattTime signal type used for region lookups.")

    @classmethod
    def from_config(cls, cfg: Config, inter_row_delay: float = None) -> "PipelineSettings":
        return cls(
            api_key=cfg.ELECTRICITY_MAPS_API_KEY,
            watt_time_user=cfg.WATT_TIME_USER,
            watt_time_password=cfg.WATT_TIME_PASSWORD,
            inter_row_delay=cfg.INTER_ROW_DELAY if inter_row_delay is None else inter_row_delay,
            signal_type=cfg.WATT_TIME_SIGNAL_TYPE,
        )


# Instantiate the config to be imported by other modules
config = Config()
