# tableside/settings/app.py
from functools import lru_cache

# Sections
from tableside.settings.sections.database import DatabaseSettings
from tableside.settings.sections.restaurant import RestaurantSettings
from tableside.settings.sections.payments import PaymentGatewaySettings
from tableside.settings.sections.notifications import NotificationSettings


class AppSettings:
    """
    Central application settings aggregator.
    Settings are loaded lazily inside __init__
    to prevent eager evaluation at import time.
    """

    def __init__(self):
        self.database = DatabaseSettings()
        self.restaurant = RestaurantSettings()
        self.payments = PaymentGatewaySettings()
        self.notifications = NotificationSettings()


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings()
