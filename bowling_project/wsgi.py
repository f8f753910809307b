"""WSGI entry point of the bowling score service."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'bowling_project.settings')

application = get_wsgi_application()
