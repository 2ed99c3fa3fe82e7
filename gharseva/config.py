import os

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is not set")

DB_ECHO = (os.getenv("DB_ECHO") or "").strip().lower() in ("1", "true", "yes")

RABBIT_URL = os.getenv("RABBIT_URL")  # optional, required if you want events
EXCHANGE_NAME = "domain_events"

SERVICE_NAME = "gharseva-match"
LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

# capped at 5 by ranking.MAX_MATCHES
MATCH_LIMIT = int(os.getenv("MATCH_LIMIT") or "5")

# Selection flow
TRIAL_DAYS = int(os.getenv("TRIAL_DAYS") or "7")
CALL_DELAY_HOURS = int(os.getenv("CALL_DELAY_HOURS") or "24")

ENABLE_SEED_ENDPOINT = (os.getenv("ENABLE_SEED_ENDPOINT") or "").strip().lower() in ("1", "true", "yes")
