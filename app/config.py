# app/config.py
import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()

GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")

FASTAPI_SECRET_KEY = os.getenv("FASTAPI_SECRET_KEY", "supersecretkey")

# "session" keeps history in the signed session cookie, "mongo" in MongoDB
HISTORY_BACKEND = os.getenv("HISTORY_BACKEND", "session").strip().lower()
MONGO_URL = os.getenv("MONGO_URL")
MONGO_DB_NAME = os.getenv("MONGO_DB_NAME", "opportunity_hub")
MONGO_COLLECTION_NAME = os.getenv("MONGO_COLLECTION_NAME", "search_history")

LOG_FILE = os.getenv("LOG_FILE", "log.txt")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
