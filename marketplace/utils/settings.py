# marketplace/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./database.db")

ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

# 0 = no timeout
IMAGE_RESOLVE_TIMEOUT = float(os.getenv("IMAGE_RESOLVE_TIMEOUT", 5))
IMAGE_RESOLVE_ATTEMPTS = int(os.getenv("IMAGE_RESOLVE_ATTEMPTS", 1))
SHORTLINK_HOST = os.getenv("SHORTLINK_HOST", "ibb.co")
DIRECT_IMAGE_HOST = os.getenv("DIRECT_IMAGE_HOST", "i.ibb.co")

CHAT_BASE_URL = os.getenv("CHAT_BASE_URL", "https://wa.me")
SUPPORT_CONTACT = os.getenv("SUPPORT_CONTACT", "5511999999999")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3000")
CLIENT_STATE_PATH = os.getenv(
    "CLIENT_STATE_PATH", os.path.join(os.path.expanduser("~"), ".marketplace", "state.json")
)

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3000))
DEBUG = bool(os.getenv("DEBUG"))
