"""
config/settings.py
Central configuration — reads from environment variables and .env file.
"""
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

PLACEHOLDER_API_KEY = "demo_key"


class Settings:

    def __init__(self):
        self._load()

    def _load(self):
        import os
        env_file = BASE_DIR / ".env"
        if env_file.exists():
            for line in env_file.read_text().splitlines():
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, _, val = line.partition("=")
                    os.environ.setdefault(key.strip(), val.strip())

        # Tracking provider
        self.vizion_api_key  = os.environ.get("VIZION_API_KEY") or PLACEHOLDER_API_KEY
        self.vizion_base_url = os.environ.get("VIZION_BASE_URL", "https://api.vizionapi.com/v1")

        # Optional LLM summaries
        self.groq_api_key = os.environ.get("GROQ_API_KEY", "")
        self.groq_model   = os.environ.get("GROQ_MODEL", "llama-3.3-70b-versatile")

        self.api_host    = os.environ.get("API_HOST", "0.0.0.0")
        self.api_port    = int(os.environ.get("API_PORT", "8000"))
        self.api_title   = "Container Tracking API"
        self.api_version = "1.0.0"

        self.metrics_port = int(os.environ.get("METRICS_PORT", "9090"))
        self.log_level    = os.environ.get("LOG_LEVEL", "INFO")

    def provider_config(self, transport=None):
        """Build the tracking provider configuration from these settings."""
        from tracking.client import ProviderConfig
        return ProviderConfig(
            base_url=self.vizion_base_url,
            api_key=self.vizion_api_key,
            transport=transport,
        )


settings = Settings()
