"""Settings package for PIREP Service. Select a module with DJANGO_SETTINGS_MODULE."""
