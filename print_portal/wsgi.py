"""WSGI entry point for the Print Portal project."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "print_portal.settings")

application = get_wsgi_application()
