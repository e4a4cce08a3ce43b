"""
Gunicorn configuration for the Docker Cleaner gateway
"""
import os

bind = f"0.0.0.0:{os.environ.get('PORT', '3001')}"

# Rate-limit counters live in process memory, one set per worker.
# Threads in a worker share one engine client.
workers = int(os.environ.get('GUNICORN_WORKERS', '2'))
worker_class = 'gthread'
threads = int(os.environ.get('GUNICORN_THREADS', '4'))

# df() and forced removals can be slow on large hosts
timeout = int(os.environ.get('GUNICORN_TIMEOUT', '120'))

accesslog = '-'
errorlog = '-'
loglevel = os.environ.get('LOG_LEVEL', 'info').lower()

proc_name = 'docker-cleaner'


def when_ready(server):
    server.log.info("Docker Cleaner gateway listening on %s (docker socket %s)",
                    bind, os.environ.get('DOCKER_SOCKET_PATH') or '/var/run/docker.sock')
