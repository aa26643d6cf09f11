"""
Configuration settings for the portfolio site-config loader.

Values come from the environment (or a local .env file). Nothing here is
required; every setting has a default.
"""

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os

# Portfolio API the loader reads site configs from
PORTFOLIO_API_BASE_URL = os.getenv("PORTFOLIO_API_BASE_URL", "http://localhost:4321")

# Portfolio to preview; unset means "show the sample site"
PORTFOLIO_ID = os.getenv("PORTFOLIO_ID") or None

# Seconds before the single config request gives up
try:
    REQUEST_TIMEOUT = float(os.getenv("PORTFOLIO_REQUEST_TIMEOUT", "10"))
except ValueError:
    REQUEST_TIMEOUT = 10.0

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
