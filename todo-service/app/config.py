import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).resolve().parents[2]

MONGO_URI = os.getenv("MONGO_URI")
MONGO_DB = os.getenv("MONGO_DB", "todo")
MONGO_COLLECTION = os.getenv("MONGO_COLLECTION", "todos")
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", 5000))

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 3001))

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()
IS_PRODUCTION = ENVIRONMENT == "production"
CLIENT_DIST = Path(os.getenv("CLIENT_DIST", BASE_DIR / "todolist" / "dist"))

USE_HTTPS = os.getenv("USE_HTTPS", "false").lower() == "true"
CERT_DIR = Path(os.getenv("CERT_DIR", BASE_DIR / "certs"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
