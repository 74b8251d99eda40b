"""Entry point for the configuration engine.

Resolves settings, mounts one shared API adapter and hands out the
handlers the engine dispatches to.
"""

from typing import Any, Optional

from .adapters import StdoutAdapter, WGEasyAPIAdapter
from .config import Settings, load_settings
from .errors import ConfigurationError
from .handlers import DATA_SOURCE_HANDLERS, RESOURCE_HANDLERS
from .interfaces import ILogSink, IPeerProvider

TYPE_NAME = "wgeasy"


class WGEasyProvider:
    """Owns the API adapter shared by every handler."""

    def __init__(self, logger: Optional[ILogSink] = None):
        self.logger = logger or StdoutAdapter()
        self.settings: Optional[Settings] = None
        self.vpn: Optional[IPeerProvider] = None

    def configure(
        self,
        endpoint: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> IPeerProvider:
        """Build the API adapter; unset values come from WGEASY_* env vars."""
        self.settings = load_settings(endpoint, username, password, timeout)

        self.vpn = WGEasyAPIAdapter.from_credentials(
            endpoint=self.settings.endpoint,
            username=self.settings.username,
            password=self.settings.password,
            timeout=self.settings.timeout,
            logger=self.logger,
        )
        self.logger.log("info", f"wg-easy endpoint: {self.settings.endpoint}")
        return self.vpn

    def _require_vpn(self) -> IPeerProvider:
        if self.vpn is None:
            raise ConfigurationError("provider not configured; call configure() first")
        return self.vpn

    def resources(self) -> dict[str, Any]:
        """Instantiate resource handlers (table-driven)."""
        vpn = self._require_vpn()
        return {
            name: handler_class(vpn, self.logger)
            for name, handler_class in RESOURCE_HANDLERS.items()
        }

    def data_sources(self) -> dict[str, Any]:
        """Instantiate data source handlers (table-driven)."""
        vpn = self._require_vpn()
        return {
            name: handler_class(vpn, self.logger)
            for name, handler_class in DATA_SOURCE_HANDLERS.items()
        }
