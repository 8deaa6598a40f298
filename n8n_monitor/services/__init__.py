"""
Service layer for the n8n monitor backend.

This package contains the record store for dashboard state and the
clients that call n8n and replay stored webhook requests.
"""

from .n8n_client import N8nClient
from .webhook_runner import execute_webhook_test

__all__ = ["N8nClient", "execute_webhook_test"]
