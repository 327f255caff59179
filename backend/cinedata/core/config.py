import os
from pathlib import Path
from typing import Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]

class Settings(BaseSettings):
    """Application settings using Pydantic BaseSettings"""
    
    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    APP_TITLE: str = os.getenv("APP_TITLE", "Cinedata")
    
    # Dataset and static files
    DATASET_PATH: Path = Path(os.getenv("DATASET_PATH", str(BASE_DIR / "data" / "movie-dataset-a2.json")))
    PUBLIC_DIR: Path = Path(os.getenv("PUBLIC_DIR", str(BASE_DIR / "public")))
    
    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Environment
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Singleton instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get settings singleton instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
