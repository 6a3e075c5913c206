# userbook/wsgi.py
# Entry point for WSGI servers (gunicorn userbook.wsgi).
# Run `python manage.py migrate` first; `manage.py serve` does it for you.
import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "userbook.settings")

application = get_wsgi_application()
