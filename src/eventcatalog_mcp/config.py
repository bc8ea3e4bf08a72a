"""Server configuration.

Settings are layered, later sources overriding earlier ones:

1. Defaults
2. YAML configuration file (``config/server.yaml``)
3. Environment variables
4. Command-line positionals: ``URL [LICENSE_KEY [TRANSPORT [PORT [BASE_PATH]]]]``
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import httpx
import yaml

from .catalog.fetch import DEFAULT_TIMEOUT
from .catalog.query import DEFAULT_PAGE_SIZE
from .constants import SERVER_NAME, SERVER_VERSION, ErrorCode, ErrorMessage
from .decorators import fault

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path(__file__).parent.parent.parent / "config" / "server.yaml"

TRANSPORTS = ("stdio", "http")

# config key -> environment variable
ENV_MAPPINGS = {
    "eventcatalog_url": "EVENTCATALOG_URL",
    "license_key": "EVENTCATALOG_SCALE_LICENSE_KEY",
    "transport": "MCP_TRANSPORT",
    "port": "PORT",
    "base_path": "BASE_PATH",
    "host": "HOST",
    "page_size": "PAGE_SIZE",
    "request_timeout": "EVENTCATALOG_TIMEOUT",
    "log_level": "LOG_LEVEL",
    "log_format": "LOG_FORMAT",
    "log_file": "LOG_FILE",
}

POSITIONAL_KEYS = ("eventcatalog_url", "license_key", "transport", "port", "base_path")


@dataclass
class ServerConfig:
    """Validated server settings."""

    eventcatalog_url: str
    license_key: Optional[str] = None
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 3000
    base_path: str = "/"
    page_size: int = DEFAULT_PAGE_SIZE
    request_timeout: float = DEFAULT_TIMEOUT
    name: str = SERVER_NAME
    version: str = SERVER_VERSION
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ServerConfig":
        """Build a config from raw (string or YAML-typed) values.

        Raises:
            McpError: With the invalid-params code when a value is missing or malformed
        """
        url = values.get("eventcatalog_url")
        if not url:
            raise fault(ErrorCode.INVALID_PARAMS, ErrorMessage.URL_NOT_SET)
        url = str(url).strip()
        if not _is_valid_url(url):
            raise fault(ErrorCode.INVALID_PARAMS, ErrorMessage.URL_INVALID)

        transport = str(values.get("transport") or "stdio").strip().lower()
        if transport not in TRANSPORTS:
            raise fault(ErrorCode.INVALID_PARAMS, ErrorMessage.TRANSPORT_INVALID)

        port = _as_int(values.get("port", 3000), ErrorMessage.PORT_INVALID)
        page_size = _as_int(values.get("page_size", DEFAULT_PAGE_SIZE), ErrorMessage.PAGE_SIZE_INVALID)
        if page_size < 1:
            raise fault(ErrorCode.INVALID_PARAMS, ErrorMessage.PAGE_SIZE_INVALID)

        try:
            timeout = float(values.get("request_timeout", DEFAULT_TIMEOUT))
        except (TypeError, ValueError):
            logger.warning(f"Invalid request timeout {values.get('request_timeout')!r}, using default")
            timeout = DEFAULT_TIMEOUT

        known = {f for f in cls.__dataclass_fields__ if f != "extra"}
        return cls(
            eventcatalog_url=url,
            license_key=values.get("license_key") or None,
            transport=transport,
            host=str(values.get("host") or "127.0.0.1"),
            port=port,
            base_path=str(values.get("base_path") or "/"),
            page_size=page_size,
            request_timeout=timeout,
            name=str(values.get("name") or SERVER_NAME),
            version=str(values.get("version") or SERVER_VERSION),
            log_level=str(values.get("log_level") or "INFO").upper(),
            log_format=str(values.get("log_format") or "json").lower(),
            log_file=values.get("log_file") or None,
            extra={k: v for k, v in values.items() if k not in known},
        )


def _is_valid_url(url: str) -> bool:
    try:
        parsed = httpx.URL(url)
    except (httpx.InvalidURL, TypeError):
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.host)


def _as_int(value: Any, message: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise fault(ErrorCode.INVALID_PARAMS, message) from None


def load_yaml_config(config_file: Optional[Path] = None) -> dict[str, Any]:
    """Read the YAML config file, flattening its ``server``/``logging`` sections.

    Missing or unreadable files yield an empty dict.
    """
    path = Path(config_file) if config_file is not None else DEFAULT_CONFIG_FILE
    if not path.exists():
        logger.debug(f"Config file not found: {path}")
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config file {path}: expected a mapping")
        return {}

    values: dict[str, Any] = {k: v for k, v in data.items() if not isinstance(v, dict)}
    for section in ("server", "catalog"):
        if isinstance(data.get(section), dict):
            values.update(data[section])
    transport = data.get("transport")
    if isinstance(transport, dict):
        values.update({k: v for k, v in transport.items() if k != "type"})
        if transport.get("type"):
            values["transport"] = transport["type"]
    if isinstance(data.get("logging"), dict):
        values.update({f"log_{key}": value for key, value in data["logging"].items()})
    logger.info(f"Loaded configuration from {path}")
    return values


def load_config(
    argv: Optional[Sequence[str]] = None,
    env: Optional[Mapping[str, str]] = None,
    config_file: Optional[Path] = None,
) -> ServerConfig:
    """Resolve configuration from file, environment and CLI positionals.

    Args:
        argv: Positional arguments (without the program name)
        env: Environment mapping (default: ``os.environ``)
        config_file: YAML file path (default: ``config/server.yaml``)

    Raises:
        McpError: With the invalid-params code for missing or malformed settings
    """
    env = os.environ if env is None else env
    values = load_yaml_config(config_file)

    for key, env_var in ENV_MAPPINGS.items():
        env_value = env.get(env_var)
        if env_value:
            values[key] = env_value

    for key, arg in zip(POSITIONAL_KEYS, argv or ()):
        if arg:
            values[key] = arg

    return ServerConfig.from_mapping(values)
