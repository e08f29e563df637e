import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BACKEND_DIR = Path(__file__).resolve().parents[1]


class Settings:
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # Persisted artifacts
    items_file: Path = Path(os.getenv("ITEMS_FILE", str(BACKEND_DIR / "items.json")))
    submissions_file: Path = Path(os.getenv("SUBMISSIONS_FILE", str(BACKEND_DIR / "submissions.xlsx")))
    booking_log_file: Path = Path(os.getenv("BOOKING_LOG_FILE", str(BACKEND_DIR / "log.txt")))

    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    cors_origins: list = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


settings = Settings()
