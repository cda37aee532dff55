from pydantic import Field
from pydantic_settings import BaseSettings


class NotificationSettings(BaseSettings):
    """
    Real-time notification settings.

    With the webhook disabled, notifications are only logged.
    """

    webhook_enabled: bool = Field(default=False)
    webhook_url: str = Field(default="")
    timeout_seconds: float = Field(default=5.0, gt=0)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "NOTIFY_",
        "extra": "ignore",
    }
