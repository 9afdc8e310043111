"""Wholesale FastAPI application.

Web server that processes cart and catalogue commands synchronously via HTTP.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# PROTEAN_ENV selects the config overlay from domain.toml:
#   - unset        → in-memory stores
#   - "sqlite"     → local sqlite file
#   - "production" → PostgreSQL
from wholesale.api.application import create_app
from wholesale.domain import wholesale

wholesale.init()

app = create_app(wholesale)
