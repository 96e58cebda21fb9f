"""Minimal Django settings so filters, settings and commands can be exercised."""

import django
from django.conf import settings


def pytest_configure(config):
    if settings.configured:
        return
    settings.configure(
        INSTALLED_APPS=["html_toc"],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": False,
            }
        ],
        USE_TZ=True,
    )
    django.setup()
