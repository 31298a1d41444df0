# simulator/config.py

import os

# --- Service ---
SERVICE_NAME = "investment-simulator"
VERSION = "0.1.0"
LOG_LEVEL = os.getenv("SIMULATOR_LOG_LEVEL", "INFO")

# --- CORS (local frontends: Next.js dev server and Vite) ---
DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("SIMULATOR_CORS_ORIGINS", ",".join(DEFAULT_CORS_ORIGINS)).split(",")
    if origin.strip()
]

# --- Form input ---
# Amount fields are typed in units of 10,000 yen
AMOUNT_UNIT = float(os.getenv("SIMULATOR_AMOUNT_UNIT", "10000"))
DEFAULT_LOCALE = os.getenv("SIMULATOR_DEFAULT_LOCALE", "ja")


class Config:
    """Flask settings, loaded with app.config.from_object."""

    SERVICE_NAME = SERVICE_NAME
    VERSION = VERSION
    LOG_LEVEL = LOG_LEVEL
    CORS_ORIGINS = CORS_ORIGINS
    AMOUNT_UNIT = AMOUNT_UNIT
    DEFAULT_LOCALE = DEFAULT_LOCALE
