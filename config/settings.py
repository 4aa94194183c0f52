# DEPENDENCIES
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application-wide settings: primary configuration source
    """
    # Application Info
    APP_NAME            : str   = "Digital Consent Tracker"
    APP_VERSION         : str   = "1.0.0"

    # Document Limits
    MIN_PASTE_LENGTH    : int   = 50      # Minimum characters for pasted text
    MAX_DOCUMENT_LENGTH : int   = 500000  # Maximum characters (500KB text)

    # Reporting
    HIGH_RISK_THRESHOLD : float = Field(default = 0.7, ge = 0.0, le = 1.0)

    # Logging Settings
    LOG_LEVEL           : str   = "INFO"
    LOG_DIR             : Path  = Path("logs")
    LOG_TO_FILE         : bool  = False


    class Config:
        env_file          = ".env"
        env_file_encoding = "utf-8"
        case_sensitive    = True


    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log directory exists
        if self.LOG_TO_FILE:
            self.LOG_DIR.mkdir(parents = True, exist_ok = True)


# Global settings instance
settings = Settings()
