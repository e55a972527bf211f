# Documentation: http://docs.gunicorn.org/en/stable/configure.html
# Example: https://github.com/benoitc/gunicorn/blob/master/examples/example_config.py

import os

# http://docs.gunicorn.org/en/stable/settings.html#wsgi-app
wsgi_app = os.environ.get("ADINJECTOR_GUNICORN_WSGI_APP", "adinjector.wsgi:application")

# http://docs.gunicorn.org/en/stable/settings.html#bind
bind = os.environ.get("ADINJECTOR_GUNICORN_BIND", "127.0.0.1:8002")

# http://docs.gunicorn.org/en/stable/settings.html#workers
workers = os.environ.get("ADINJECTOR_GUNICORN_WORKERS", "2")

# http://docs.gunicorn.org/en/stable/settings.html#worker-class
worker_class = os.environ.get("ADINJECTOR_GUNICORN_WORKER_CLASS", "sync")

# http://docs.gunicorn.org/en/stable/settings.html#timeout
timeout = os.environ.get("ADINJECTOR_GUNICORN_TIMEOUT", "30")

# http://docs.gunicorn.org/en/stable/settings.html#chdir
chdir = os.environ.get("ADINJECTOR_GUNICORN_CHDIR", "/usr/lib/adinjector")

# http://docs.gunicorn.org/en/stable/settings.html#accesslog
accesslog = os.environ.get("ADINJECTOR_GUNICORN_ACCESSLOG", None)

# http://docs.gunicorn.org/en/stable/settings.html#errorlog
errorlog = os.environ.get("ADINJECTOR_GUNICORN_ERRORLOG", "-")

# http://docs.gunicorn.org/en/stable/settings.html#loglevel
loglevel = os.environ.get("ADINJECTOR_GUNICORN_LOGLEVEL", "info")

# http://docs.gunicorn.org/en/stable/settings.html#proc-name
proc_name = os.environ.get("ADINJECTOR_GUNICORN_PROC_NAME", "adinjector")
