"""run_dev.py — Start the Museum Events API in development mode.

Equivalent CLI command (run from backend/):
    uvicorn api.main:app --reload --host 0.0.0.0 --port 8000

The --reload flag watches for file changes and restarts automatically.
Logging is configured by the app lifespan from LOG_LEVEL, so uvicorn's own
log level only affects its access/error loggers.
"""

import uvicorn

from core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=not settings.is_production,
        log_level=settings.log_level.lower(),
    )
