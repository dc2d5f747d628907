# env vars + constants
import os

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_CATEGORIES = "あつい,ちょうどよい,さむい"
CATEGORIES = [
    c.strip() for c in os.getenv("VOTE_CATEGORIES", DEFAULT_CATEGORIES).split(",") if c.strip()
]

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
CORS_METHODS = ["GET", "POST"]
