"""
Outbound HTTP session dependency.
"""

from __future__ import annotations

import requests


def get_http_session():
    """Yield a `requests.Session` for one request's outbound calls."""
    session = requests.Session()
    try:
        yield session
    finally:
        session.close()
