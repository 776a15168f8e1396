"""WiFi coverage propagation and metrics engine."""

from wifi_coverage.core.config import settings

__version__ = settings.APP_VERSION
