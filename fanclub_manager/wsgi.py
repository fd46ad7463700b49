"""WSGI entry point for ``fanclub_manager``."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "fanclub_manager.settings")

application = get_wsgi_application()
