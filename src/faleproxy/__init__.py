"""Fetch an HTML page and rewrite every case-variant of one word into another."""

__version__ = "0.1.0"

from faleproxy.config import Settings, load_settings
from faleproxy.errors import FaleProxyError, FetchError, InvalidUrlError
from faleproxy.orchestrator.runner import run_pipeline

__all__ = [
    "__version__",
    "FaleProxyError",
    "FetchError",
    "InvalidUrlError",
    "Settings",
    "load_settings",
    "run_pipeline",
]
