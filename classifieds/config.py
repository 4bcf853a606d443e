import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _as_bool(value: str, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    openai_api_key: str = os.getenv("OPENAI_API_KEY", "")
    openai_base_url: str = os.getenv("OPENAI_BASE_URL", "")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-5-nano")
    debug_log: bool = _as_bool(os.getenv("DEBUG_LOG", "0"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    suggestion_debounce_ms: int = int(os.getenv("SUGGESTION_DEBOUNCE_MS", "750"))
    suggestion_timeout_seconds: float = float(os.getenv("SUGGESTION_TIMEOUT_SECONDS", "8"))
    max_suggestions: int = int(os.getenv("MAX_SUGGESTIONS", "5"))
    default_country: str = os.getenv("DEFAULT_COUNTRY", "Nigeria")
    gradio_server_name: str = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
    gradio_server_port: int = int(os.getenv("GRADIO_SERVER_PORT", "7860"))


settings = Settings()
