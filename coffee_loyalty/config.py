import os

from dotenv import load_dotenv

# Load .env file with explicit UTF-8 encoding
load_dotenv(encoding="utf-8")

DEFAULT_DATABASE_URL = "postgresql+psycopg2://localhost:5432/tsuki_coffee"

DATABASE_URL = os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL

HOST = os.getenv("HOST") or "127.0.0.1"
PORT = int(os.getenv("PORT") or "8001")

LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

CORS_ORIGINS = [o.strip() for o in (os.getenv("CORS_ORIGINS") or "*").split(",") if o.strip()]
