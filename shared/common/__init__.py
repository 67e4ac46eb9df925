# Shared Common Library for the Virtual Airline services.
# Model mixins, request middleware and the DRF exception handler
# used by every service in this repository.

__version__ = "1.0.0"
