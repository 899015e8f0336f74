import os
import logging
from dotenv import load_dotenv
from typing import Dict, Any, List

# Load environment variables from .env file
load_dotenv()

# Configure logging
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _mask(secret) -> str:
    if not secret:
        return "<unset>"
    return f"...{secret[-4:]}"


class Config:
    """Central configuration class for all application settings."""

    def __init__(self):
        # ---------------------------------------------------------------------
        # Twilio/WhatsApp Configuration
        # ---------------------------------------------------------------------
        self.TWILIO: Dict[str, str] = {
            "account_sid": os.getenv("TWILIO_ACCOUNT_SID"),
            "auth_token": os.getenv("TWILIO_AUTH_TOKEN"),
            "whatsapp_from": os.getenv("TWILIO_WHATSAPP_FROM"),
        }

        # ---------------------------------------------------------------------
        # OpenAI Configuration
        # ---------------------------------------------------------------------
        self.OPENAI: Dict[str, Any] = {
            "api_key": os.getenv("OPENAI_API_KEY"),
            "model": os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            "temperature": float(os.getenv("OPENAI_TEMPERATURE", "0.4")),
            "max_tokens": int(os.getenv("OPENAI_MAX_TOKENS", "150")),
            "timeout": float(os.getenv("OPENAI_TIMEOUT", "15")),
        }

        # ---------------------------------------------------------------------
        # Business Configuration
        # ---------------------------------------------------------------------
        self.BUSINESS: Dict[str, Any] = {
            "name": os.getenv("BUSINESS_NAME", "Local Business"),
            "website": os.getenv("BUSINESS_WEBSITE_URL", "https://example.com"),
            "intents_file": os.getenv("INTENTS_FILE"),
        }

        # ---------------------------------------------------------------------
        # Application Settings
        # ---------------------------------------------------------------------
        self.APP: Dict[str, Any] = {
            "debug": os.getenv("DEBUG", "False").lower() == "true",
            "port": int(os.getenv("PORT", "4000")),
            "log_dir": os.getenv("LOG_DIR", "logs"),
            "log_window": 200,
            "ngrok_auth_token": os.getenv("NGROK_AUTH_TOKEN"),
            "cors_origins": _split_csv(os.getenv("CORS_ORIGINS", "*")),
        }

        # Validate configurations
        self._validate_twilio_config()
        self._validate_openai_config()

        # Add direct attributes for frequently accessed settings
        self.BUSINESS_NAME = self.BUSINESS["name"]
        self.BUSINESS_WEBSITE_URL = self.BUSINESS["website"]

    # ---------------------------------------------------------------------
    # Validation Methods
    # ---------------------------------------------------------------------
    def _validate_twilio_config(self):
        """Warn when Twilio credentials are missing; sending becomes a no-op."""
        if not self.twilio_configured():
            logging.warning("TWILIO credentials missing. Fill .env from .env.example")

    def _validate_openai_config(self):
        """Warn when the OpenAI key is missing; AI fallback replies with an apology."""
        if not self.openai_configured():
            logging.warning("OPENAI_API_KEY missing. Fill .env from .env.example")

    def twilio_configured(self) -> bool:
        return bool(
            self.TWILIO["account_sid"]
            and self.TWILIO["auth_token"]
            and self.TWILIO["whatsapp_from"]
        )

    def openai_configured(self) -> bool:
        return bool(self.OPENAI["api_key"])

    # ---------------------------------------------------------------------
    # Logging Configuration
    # ---------------------------------------------------------------------
    def log_configuration(self):
        """Log the loaded configuration for debugging purposes."""
        logging.info("Configuration loaded for %s", self.BUSINESS_NAME)
        logging.debug(
            "Twilio Config: %s",
            {
                "account_sid": _mask(self.TWILIO["account_sid"]),
                "auth_token": _mask(self.TWILIO["auth_token"]),
                "whatsapp_from": self.TWILIO["whatsapp_from"],
            },
        )
        logging.debug(
            "OpenAI Config: %s",
            {**self.OPENAI, "api_key": _mask(self.OPENAI["api_key"])},
        )
        logging.debug("Business Config: %s", self.BUSINESS)
        logging.debug(
            "App Settings: %s",
            {**self.APP, "ngrok_auth_token": _mask(self.APP["ngrok_auth_token"])},
        )

# ---------------------------------------------------------------------
# Module-level Configuration Instance
# ---------------------------------------------------------------------
config = Config()
