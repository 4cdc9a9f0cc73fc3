from __future__ import annotations

from dataclasses import dataclass

from .emit import DEFAULT_DIALECT, Dialect, get_dialect
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class EmitConfig:
    """Rendering options for emitted expressions and types."""

    dialect: str = DEFAULT_DIALECT
    leaf_prefix: str = "T"
    indent: int | None = None

    def __post_init__(self) -> None:
        if self.indent is not None and self.indent < 0:
            raise ConfigurationError(f"indent must be non-negative, got {self.indent}")
        if not self.leaf_prefix:
            raise ConfigurationError("leaf_prefix must not be empty")

    @classmethod
    def recommended(cls) -> "EmitConfig":
        """Single-line output in the futures 0.1 dialect."""
        return cls()

    def resolve_dialect(self) -> Dialect:
        return get_dialect(self.dialect)

    def as_dict(self) -> dict[str, str | int | None]:
        return {
            "dialect": self.dialect,
            "leaf_prefix": self.leaf_prefix,
            "indent": self.indent,
        }
