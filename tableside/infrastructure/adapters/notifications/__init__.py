"""Notification service adapters."""
from .logging_notification_service import LoggingNotificationService
from .messages import NotificationMessage
from .webhook_notification_service import WebhookNotificationService

__all__ = [
    "LoggingNotificationService",
    "NotificationMessage",
    "WebhookNotificationService",
]
