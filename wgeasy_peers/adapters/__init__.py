"""Adapter implementations for the wg-easy peer client."""

from .wg_easy_api_adapter import WGEasyAPIAdapter
from .request_executor import RequestExecutor
from .session_manager import Credentials, SessionManager
from .stdout_adapter import StdoutAdapter

__all__ = [
    'WGEasyAPIAdapter',
    'RequestExecutor',
    'Credentials',
    'SessionManager',
    'StdoutAdapter',
]
