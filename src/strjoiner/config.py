"""Joiner configuration: frozen config and option functions.

A Joiner is configured by folding option functions over a zero-valued
JoinerConfig. Each option returns a new JoinerConfig, so options compose
left to right and a later option wins for the same field.

Usage:
    from strjoiner import new_joiner, with_joiner, with_step

    j = new_joiner(with_joiner("[", ";", "]"), with_step(","))
    # prefix "[", step ",", suffix "]"

    # Start from a stored config instead of the zero value
    base = JoinerConfig.from_dict({"prefix": "(", "suffix": ")"})
    config = apply_options(with_step(", "), base=base)

Thread Safety:
    JoinerConfig is immutable. Option functions hold no state.

"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class JoinerConfig:
    """Immutable joiner configuration.

    Attributes:
        prefix: Text rendered before the joined fragments
        step: Delimiter inserted between consecutive writes
        suffix: Text rendered after the joined fragments

    """

    prefix: str = ""
    step: str = ""
    suffix: str = ""

    @property
    def affix_length(self) -> int:
        """Encoded byte length of prefix plus suffix.

        Uses the same UTF-8 surrogateescape encoding as written fragments.
        """
        return len(self.prefix.encode("utf-8", "surrogateescape")) + len(
            self.suffix.encode("utf-8", "surrogateescape")
        )

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "JoinerConfig":
        """Create JoinerConfig from a mapping.

        Only keys that are JoinerConfig field names are used; unknown keys
        are silently ignored.

        Example:
            >>> JoinerConfig.from_dict({"step": ",", "color": "red"})
            JoinerConfig(prefix='', step=',', suffix='')

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


JoinerOption = Callable[[JoinerConfig], JoinerConfig]


def with_prefix(prefix: str) -> JoinerOption:
    """Return an option that sets the prefix."""

    def option(config: JoinerConfig) -> JoinerConfig:
        return replace(config, prefix=prefix)

    return option


def with_step(step: str) -> JoinerOption:
    """Return an option that sets the step (delimiter)."""

    def option(config: JoinerConfig) -> JoinerConfig:
        return replace(config, step=step)

    return option


def with_suffix(suffix: str) -> JoinerOption:
    """Return an option that sets the suffix."""

    def option(config: JoinerConfig) -> JoinerConfig:
        return replace(config, suffix=suffix)

    return option


def with_joiner(prefix: str, step: str, suffix: str) -> JoinerOption:
    """Return an option that sets prefix, step and suffix together."""

    def option(config: JoinerConfig) -> JoinerConfig:
        return replace(config, prefix=prefix, step=step, suffix=suffix)

    return option


# Module-level zero-valued config (immutable, shared)
_ZERO_CONFIG: JoinerConfig = JoinerConfig()


def apply_options(
    *options: JoinerOption,
    base: JoinerConfig | None = None,
) -> JoinerConfig:
    """Fold options over a base config, left to right.

    Args:
        *options: Option functions, applied in order
        base: Starting config (zero-valued JoinerConfig() if None)

    Returns:
        The resulting JoinerConfig
    """
    config = _ZERO_CONFIG if base is None else base
    for option in options:
        config = option(config)
    return config


__all__ = [
    "JoinerConfig",
    "JoinerOption",
    "apply_options",
    "with_joiner",
    "with_prefix",
    "with_step",
    "with_suffix",
]
