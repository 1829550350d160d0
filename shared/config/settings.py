import os
from dotenv import load_dotenv

load_dotenv()

SERVICE_NAME = os.getenv("SERVICE_NAME", "b2b_wholesale")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Tracing is only exported when a collector endpoint is configured
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT")
TRACING_ENABLED = os.getenv("TRACING_ENABLED", "true" if OTLP_ENDPOINT else "false").lower() in ("1", "true", "yes")


def cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
