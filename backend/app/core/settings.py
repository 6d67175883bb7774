import os


class Settings:
    def __init__(self):
        self.app_name = "Networking CRM"
        self.api_version = "1.0.0"
        self.environment = os.getenv("ENVIRONMENT", "development")
        self.database_url = os.getenv("DATABASE_URL", "sqlite:///./networking_crm.db")
        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        self.openai_model = os.getenv("OPENAI_MODEL", "gpt-4o")
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        # Fixed pause after a 429 from the language model during bulk regeneration
        self.rate_limit_pause_seconds = float(os.getenv("SUMMARY_RATE_LIMIT_PAUSE_SECONDS", "60"))
        self.cors_origins = [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]


_settings_instance = None


def get_settings():
    """Return a singleton Settings instance."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
