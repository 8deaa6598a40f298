"""
n8n Monitor backend.

Stores the dashboard's n8n connection settings, workflow alert rules and
webhook test fixtures, and proxies the n8n REST API for the dashboard UI.
"""

__version__ = "0.1.0"
