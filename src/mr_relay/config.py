# src/mr_relay/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


WECOM_WEBHOOK_URL = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="MR_RELAY_")

    # WeCom bot
    wecom_key: str
    wecom_url: str = WECOM_WEBHOOK_URL
    request_timeout: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
