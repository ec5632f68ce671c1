"""
ASGI config for the project.

Exposes the ASGI callable as a module-level variable named ``application`` for
ASGI servers (uvicorn, daphne, ...). The catalog views are synchronous; Django
runs them in a thread pool under ASGI.
"""

from django.core.asgi import get_asgi_application

from config.env import configure_django_settings

configure_django_settings()

application = get_asgi_application()
