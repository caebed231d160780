# gunicorn.conf.py — Production server configuration.
#
# Run from backend/ with:
#   gunicorn api.main:app -c gunicorn.conf.py

# Each worker runs its own lifespan, so each loads its own event catalog
workers = 2
worker_class = "uvicorn.workers.UvicornWorker"

# Bind
bind = "0.0.0.0:8000"

# Logging — stdout/stderr for the process manager; app logs are JSON (core/logging.py)
accesslog = "-"
errorlog  = "-"
loglevel  = "info"

# Timeouts
timeout          = 30    # seconds before a worker is killed and restarted
keepalive        = 5     # seconds to wait for the next request on a keep-alive connection
graceful_timeout = 30    # seconds to finish in-flight requests on SIGTERM
