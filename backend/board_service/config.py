import logging
import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "../../.env"))

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./board.db")
TOKEN_TTL_SECONDS = int(os.getenv("TOKEN_TTL_SECONDS", "3600"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

RECENT_BOARDS_LIMIT = 5

if TOKEN_TTL_SECONDS <= 0:
    logging.warning("TOKEN_TTL_SECONDS=%s, every issued token will be expired", TOKEN_TTL_SECONDS)
