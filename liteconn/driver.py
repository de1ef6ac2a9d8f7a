"""Driver entry point and registry."""

from typing import Any

from pydantic import BaseModel, Field

from liteconn.config import Settings, parse_bool, settings
from liteconn.constants import (
    DRIVER_MAJOR_VERSION,
    DRIVER_MINOR_VERSION,
    MEMORY_TARGET,
    URL_PREFIX,
)
from liteconn.database.connection import Connection, ConnectionConfig, EngineFactory
from liteconn.database.implementations.sqlite import SQLiteEngine
from liteconn.exceptions import ConfigurationError
from liteconn.log import get_logger

logger = get_logger(__name__)


class DriverPropertyInfo(BaseModel):
    """Description of one connection property the driver understands."""

    name: str = Field(description="Property name")
    value: str = Field(description="Default value")
    choices: list[str] = Field(default_factory=list, description="Accepted values")
    description: str = Field(default="", description="What the property does")
    required: bool = Field(default=False, description="Whether it must be given")


class Driver:
    """Turns ``sqlite:<target>`` URLs into connections."""

    major_version = DRIVER_MAJOR_VERSION
    minor_version = DRIVER_MINOR_VERSION
    jdbc_compliant = False

    def __init__(
        self,
        driver_settings: Settings | None = None,
        engine_factory: EngineFactory = SQLiteEngine,
    ) -> None:
        self.settings = driver_settings or settings
        self.engine_factory = engine_factory

    def accepts_url(self, url: str | None) -> bool:
        return url is not None and url.lower().startswith(URL_PREFIX)

    def get_property_info(
        self, url: str, properties: dict[str, Any] | None = None
    ) -> list[DriverPropertyInfo]:
        return [
            DriverPropertyInfo(
                name="shared_cache",
                value="false",
                choices=["true", "false"],
                description="Enable SQLite Shared-Cache mode.",
            ),
            DriverPropertyInfo(
                name="julian_day",
                value="false",
                choices=["true", "false"],
                description="Store Dates/Times as julian day numbers.",
            ),
        ]

    def parse_url(
        self, url: str, properties: dict[str, Any] | None = None
    ) -> ConnectionConfig:
        """Build a connection configuration from an accepted URL.

        An empty target after the prefix means an in-memory database.
        """
        properties = properties or {}
        url = url.strip()
        target = url[len(URL_PREFIX) :] or MEMORY_TARGET

        return ConnectionConfig(
            url=url,
            target=target,
            shared_cache=parse_bool(
                properties.get("shared_cache"), self.settings.default_shared_cache
            ),
            julian_day=parse_bool(
                properties.get("julian_day"), self.settings.default_julian_day
            ),
            busy_timeout_ms=self.settings.busy_timeout_ms,
        )

    def connect(
        self, url: str, properties: dict[str, Any] | None = None
    ) -> Connection | None:
        """Open a connection, or return None if the URL is not ours."""
        if not self.accepts_url(url):
            return None
        return Connection(self.parse_url(url, properties), self.engine_factory)


class DriverRegistry:
    """Process-wide list of drivers, filled in explicitly at startup."""

    def __init__(self) -> None:
        self._drivers: list[Driver] = []

    def register(self, driver: Driver) -> bool:
        """Register ``driver``.

        Returns:
            False if it was already registered
        """
        if driver in self._drivers:
            return False
        self._drivers.append(driver)
        logger.info(f"Registered driver: {type(driver).__name__}")
        return True

    def deregister(self, driver: Driver) -> None:
        if driver in self._drivers:
            self._drivers.remove(driver)
            logger.info(f"Deregistered driver: {type(driver).__name__}")

    @property
    def drivers(self) -> list[Driver]:
        return self._drivers.copy()

    def get_driver(self, url: str) -> Driver:
        for driver in self._drivers:
            if driver.accepts_url(url):
                return driver
        raise ConfigurationError(f"No suitable driver for {url}")

    def connect(self, url: str, properties: dict[str, Any] | None = None) -> Connection:
        """Open ``url`` with the first registered driver that accepts it.

        Raises:
            ConfigurationError: If no registered driver accepts the URL
        """
        connection = self.get_driver(url).connect(url, properties)
        if connection is None:
            raise ConfigurationError(f"No suitable driver for {url}")
        return connection


# Global registry and driver instances
registry = DriverRegistry()
default_driver = Driver()


def register() -> bool:
    """Register the SQLite driver with the global registry."""
    return registry.register(default_driver)


def connect(url: str, **properties: Any) -> Connection:
    """Open ``url`` through the global registry."""
    return registry.connect(url, properties)
