"""Dataclass-based domain configuration pattern.

The catalog defines its listen address, store connection and logging as a
frozen dataclass. The defaults are the fixed deployment values; from_env()
lets an operator override any of them without touching code.
"""

import os
from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Nested config sections
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ServerConfig:
    """HTTP listen address."""

    host: str = "127.0.0.1"
    port: int = 3000


@dataclass(frozen=True)
class StoreConfig:
    """Backing store connection."""

    database_url: str = "sqlite+aiosqlite:///./biblioteca.db"
    pool_size: int = 20
    max_overflow: int = 10
    echo: bool = False


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    format: str = "text"  # "text" or "json"


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BibliotecaConfig:
    """Complete configuration for the catalog service.

    Usage::

        config = BibliotecaConfig.from_env()
        uvicorn.run(app, host=config.server.host, port=config.server.port)
    """

    server: ServerConfig = field(default_factory=ServerConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def default(cls) -> "BibliotecaConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "BIBLIOTECA_") -> "BibliotecaConfig":
        """Create config from environment variables.

        Example: BIBLIOTECA_PORT=8080 BIBLIOTECA_DATABASE_URL=sqlite+aiosqlite:///data.db
        """
        defaults = cls()

        def env(name: str, fallback):
            return os.getenv(f"{prefix}{name}", fallback)

        server = ServerConfig(
            host=env("HOST", defaults.server.host),
            port=int(env("PORT", defaults.server.port)),
        )
        store = StoreConfig(
            database_url=env("DATABASE_URL", defaults.store.database_url),
            pool_size=int(env("DB_POOL_SIZE", defaults.store.pool_size)),
            max_overflow=int(env("DB_MAX_OVERFLOW", defaults.store.max_overflow)),
            echo=str(env("DB_ECHO", defaults.store.echo)).lower() == "true",
        )
        log = LoggingConfig(
            level=env("LOG_LEVEL", defaults.logging.level),
            format=env("LOG_FORMAT", defaults.logging.format),
        )
        return cls(server=server, store=store, logging=log)
