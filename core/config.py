# core/config.py
import os
from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("API_BASE_URL", "https://admin.thetoyfair.eu/api")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "10"))
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///brand_admin.db")
AUDIT_ACTOR = os.getenv("AUDIT_ACTOR", "admin")
APP_VIEW = os.getenv("APP_VIEW", "web")  # "web" or "desktop"
APP_PORT = int(os.getenv("APP_PORT", "8550"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
