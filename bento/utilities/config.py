"""Configuration management for the BentoHub service."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# AI extraction service (OpenAI-compatible)
OPENAI_API_KEY: Final[Optional[str]] = os.getenv('OPENAI_API_KEY') or None
OPENAI_BASE_URL: Final[Optional[str]] = os.getenv('OPENAI_BASE_URL') or None
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-4o')

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Uploads
MAX_UPLOAD_BYTES: Final[int] = int(os.getenv('MAX_UPLOAD_BYTES', str(10 * 1024 * 1024)))

# Costing / scaling defaults
DEFAULT_CURRENCY: Final[str] = os.getenv('DEFAULT_CURRENCY', 'USD')
DEFAULT_TARGET_WEIGHT_PER_PIECE: Final[float] = float(os.getenv('DEFAULT_TARGET_WEIGHT_PER_PIECE', '30'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('BENTO_DATA_DIR', str(BASE_DIR / 'data')))
