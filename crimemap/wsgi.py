"""
WSGI config for crimemap project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'crimemap.settings')

application = get_wsgi_application()
