from prometheus_client import multiprocess

import settings

bind = f"0.0.0.0:{settings.API_PORT}"
worker_class = "uvicorn.workers.UvicornWorker"


# needed for prometheus multiprocessing metrics when gunicorn is used
# https://github.com/prometheus/client_python#multiprocess-mode-eg-gunicorn
def child_exit(server, worker):
    multiprocess.mark_process_dead(worker.pid)
