"""Services package."""

from app.services.forwarder import WebhookForwarder
from app.services.updater import TransactionUpdateService

__all__ = [
    "TransactionUpdateService",
    "WebhookForwarder",
]
