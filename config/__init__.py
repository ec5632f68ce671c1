"""Django project configuration for the storefront catalog API (settings, URLs, WSGI/ASGI)."""
