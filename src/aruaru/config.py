import os

from dotenv import load_dotenv

# Load from .env if it exists (useful for local development)
load_dotenv()

# --- LLM provider ---
LLM_PROVIDER = os.getenv("LLM_PROVIDER", "openai")
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o-mini")
OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
# High temperature favours variety between generations
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.8"))
# Three short snippets plus JSON overhead
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "400"))
LLM_TIMEOUT_S = float(os.getenv("LLM_TIMEOUT_S", "30"))

LOGGING_LEVEL = os.getenv("LOGGING_LEVEL", "INFO").upper()

# --- Attempt log (Google Sheets) ---
ATTEMPT_LOG_SPREADSHEET_ID = os.getenv("ATTEMPT_LOG_SPREADSHEET_ID", "")
ATTEMPT_LOG_SHEET_NAME = os.getenv("ATTEMPT_LOG_SHEET_NAME", "aruaru_logs")
ATTEMPT_LOG_HEADERS = ["id", "topic", "generated_texts", "created_at"]
ATTEMPT_LOG_FLUSH_TIMEOUT_S = float(os.getenv("ATTEMPT_LOG_FLUSH_TIMEOUT_S", "5"))
RECENT_LOGS_LIMIT = int(os.getenv("RECENT_LOGS_LIMIT", "100"))

# "Today" in dashboard stats is evaluated in this zone
TIMEZONE = os.getenv("TIMEZONE", "Asia/Tokyo")

# --- HTTP ---
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# --- Google service account ---
# Raw JSON in this env var wins over the key file
GOOGLE_CREDENTIALS_JSON_ENV = "GOOGLE_CREDENTIALS_JSON"
GOOGLE_CREDENTIALS_FILE = os.getenv("GOOGLE_CREDENTIALS_FILE", "credentials.json")
