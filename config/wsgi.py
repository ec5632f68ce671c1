"""
WSGI config for the project.

Exposes the WSGI callable as ``application`` for gunicorn/uWSGI, e.g.
`gunicorn config.wsgi:application`.
"""

from django.core.wsgi import get_wsgi_application

from config.env import configure_django_settings

configure_django_settings()

application = get_wsgi_application()
