"""Allergen Service — configuration loaded from the environment / .env file."""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Provider ──────────────────────────────────────────────────────────────────
# Not validated here: a missing key shows up as a provider auth failure.
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "").strip()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_API_URL = os.getenv("GEMINI_API_URL", "https://generativelanguage.googleapis.com/v1beta")
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "30"))

# ── Server ────────────────────────────────────────────────────────────────────
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "info")
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# ── Client ────────────────────────────────────────────────────────────────────
GATEWAY_URL = os.getenv("GATEWAY_URL", f"http://localhost:{PORT}")
