# Configuration constants for the exoplanet explorer backend
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Data settings
DATA_CSV = os.environ.get("DATA_CSV") or str(PROJECT_ROOT / "public" / "exoplanet_scores_Final.csv")
CSV_CHUNK_SIZE = 5000
NULL_MARKERS = ("", "NA", "N/A")
NATURAL_KEY = "pl_name"

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
LISTING_CAP = 100

# Ingestion fallback ranges (uniform draws)
HABITABILITY_FALLBACK_RANGE = (0.3, 0.9)
TERRAFORMABILITY_FALLBACK_RANGE = (0.4, 0.95)

# Display fallback heuristic
DISPLAY_HABITABILITY_BASELINE = 0.5
DISPLAY_TERRAFORMABILITY_BASELINE = 0.6
DISPLAY_SCORE_BOUNDS = (0.1, 0.99)

# AI settings
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.0-flash")
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
AI_TIMEOUT_S = float(os.environ.get("AI_TIMEOUT_S", "60"))

# Server
DATABASE_URL = os.environ.get("DATABASE_URL") or "sqlite:///" + str(PROJECT_ROOT / "instance" / "exoplanets.db")
SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-me")
CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
