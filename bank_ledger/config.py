"""Configuration management for bank-ledger."""

from dataclasses import dataclass, field

from bank_ledger.exceptions import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("standard", "json")
OUTPUT_FORMATS = ("text", "json")


@dataclass
class LedgerConfig:
    """Ledger behavior switches."""

    # Refuse create_account on an existing identifier instead of replacing it
    reject_duplicates: bool = False


@dataclass
class MenuConfig:
    """Menu shell output configuration."""

    output_format: str = "text"
    pretty_json: bool = False

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigurationError(
                f"Unknown output format {self.output_format!r}, expected one of {OUTPUT_FORMATS}"
            )


@dataclass
class AppConfig:
    """Main configuration for bank-ledger."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    menu: MenuConfig = field(default_factory=MenuConfig)
    log_level: str = "WARNING"
    log_format: str = "standard"

    def __post_init__(self) -> None:
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigurationError(f"Unknown log format {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create config from environment variables."""
        import os

        ledger = LedgerConfig(
            reject_duplicates=_env_flag("LEDGER_REJECT_DUPLICATES"),
        )

        menu = MenuConfig(
            output_format=os.getenv("OUTPUT_FORMAT", "text"),
            pretty_json=_env_flag("PRETTY_JSON"),
        )

        return cls(
            ledger=ledger,
            menu=menu,
            log_level=os.getenv("LOG_LEVEL", "WARNING"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _env_flag(name: str) -> bool:
    import os

    return os.getenv(name, "false").lower() == "true"
