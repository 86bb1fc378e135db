"""
Configuration management for the article service.
Loads environment variables and provides access to configuration settings.
"""
import os
from typing import Tuple
from dotenv import load_dotenv

DEFAULT_LISTEN_ADDR = ":4000"
ALL_INTERFACES = "0.0.0.0"


def parse_listen_address(addr: str) -> Tuple[str, int]:
    """
    Split a listen address into host and port.

    Accepts ``host:port``, ``:port`` (all interfaces) and ``[ipv6]:port``.

    Args:
        addr: Listen address string

    Returns:
        Tuple of (host, port)

    Raises:
        ValueError: If the address has no valid port
    """
    host, sep, port_text = addr.rpartition(":")
    if not sep or not port_text.isdigit():
        raise ValueError(f"Invalid listen address: {addr!r}")

    port = int(port_text)
    if port > 65535:
        raise ValueError(f"Invalid listen port: {port}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host or ALL_INTERFACES, port


class Config:
    """Configuration settings loaded from environment variables."""

    def __init__(self):
        """Initialize configuration by loading environment variables."""
        load_dotenv()

    @property
    def listen_addr(self) -> str:
        """Get the HTTP listen address."""
        return os.getenv("LISTEN_ADDR", DEFAULT_LISTEN_ADDR)

    @property
    def listen_host(self) -> str:
        """Get the host part of the listen address."""
        return parse_listen_address(self.listen_addr)[0]

    @property
    def listen_port(self) -> int:
        """Get the port part of the listen address."""
        return parse_listen_address(self.listen_addr)[1]

    @property
    def log_level(self) -> str:
        """Get log level name."""
        return os.getenv("LOG_LEVEL", "INFO").upper()
