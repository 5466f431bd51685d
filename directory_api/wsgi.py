# directory_api/wsgi.py
# WSGI entry point (e.g. gunicorn directory_api.wsgi:app)
from directory_api.main import create_app

app = create_app()
