from .database import DatabaseSettings
from .restaurant import RestaurantSettings
from .payments import PaymentGatewaySettings
from .notifications import NotificationSettings

__all__ = [
    "DatabaseSettings",
    "RestaurantSettings",
    "PaymentGatewaySettings",
    "NotificationSettings",
]
