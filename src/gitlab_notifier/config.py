# src/gitlab_notifier/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_notifier.senders.wecom import WeComSender


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # WeCom group robot
    wecom_webhook_url: str = WeComSender.DEFAULT_URL
    send_timeout: float = 10.0

    # GitLab
    gitlab_webhook_secret: str | None = None

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
