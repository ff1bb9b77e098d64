"""Configuration management for bank-ledger."""

import os
from dataclasses import dataclass

from bank_ledger.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class LedgerConfig:
    """Main configuration for bank-ledger."""

    default_bank_name: str = "Banco del Estado"
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None
    locale: str = "es_MX"

    def __post_init__(self) -> None:
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(
                f"Unknown log format {self.log_format!r}; expected one of {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_env(cls) -> "LedgerConfig":
        """Create config from environment variables."""
        seed_str = os.getenv("SEED")
        try:
            seed = int(seed_str) if seed_str else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed_str!r}") from exc

        return cls(
            default_bank_name=os.getenv("LEDGER_BANK_NAME", "Banco del Estado"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard").lower(),
            seed=seed,
            locale=os.getenv("FAKER_LOCALE", "es_MX"),
        )
