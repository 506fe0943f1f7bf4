import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

PROJECT_DIR = Path(__file__).resolve().parent.parent

DEFAULT_PORT = 3000
DEFAULT_FACTURAS_FILE = PROJECT_DIR / "facturas_result.json"
DEFAULT_DGII_TIMBRE_URL = "https://fc.dgii.gov.do/eCF/ConsultaTimbreFC"

# CORS: any origin may read, nothing may write
CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET"]
CORS_ALLOW_HEADERS = ["Content-Type", "ngrok-skip-browser-warning"]


@dataclass(frozen=True)
class Settings:
    port: int
    host: str
    facturas_file: Path
    dgii_timbre_url: str
    log_level: str
    reload: bool


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def get_settings() -> Settings:
    """Read settings from the environment at call time"""
    return Settings(
        port=int(os.getenv("PORT", DEFAULT_PORT)),
        host=os.getenv("HOST", "0.0.0.0"),
        facturas_file=Path(os.getenv("FACTURAS_FILE", str(DEFAULT_FACTURAS_FILE))),
        dgii_timbre_url=os.getenv("DGII_TIMBRE_URL", DEFAULT_DGII_TIMBRE_URL).strip() or DEFAULT_DGII_TIMBRE_URL,
        log_level=os.getenv("LOG_LEVEL", "info").strip().lower() or "info",
        reload=_env_flag("API_RELOAD"),
    )


def setup_logging(level: str = "info") -> None:
    """Configure the root logger once; later calls keep existing handlers"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
