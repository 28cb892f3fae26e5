"""Chat bot use cases"""
from .handle_bot_update import HandleBotUpdate

__all__ = [
    "HandleBotUpdate",
]
