# src/mr_relay/notifiers/__init__.py
from .base import Notifier
from .wecom import WeComClient

__all__ = ["Notifier", "WeComClient"]
