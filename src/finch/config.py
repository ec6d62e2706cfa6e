"""Router configuration.

RouterConfig is a frozen dataclass: validated once at construction and
read-only while requests are being served.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from finch.errors import ConfigurationError

WILDCARD = "*"


def _normalize(field_name: str, values: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(values, str):
        msg = f"RouterConfig.{field_name} must be a list of strings, not a string: {values!r}"
        raise ConfigurationError(msg)
    result = tuple(values)
    for value in result:
        if not isinstance(value, str) or not value:
            msg = f"RouterConfig.{field_name} entries must be non-empty strings, got {value!r}"
            raise ConfigurationError(msg)
    if WILDCARD in result and len(result) > 1:
        msg = (
            f"RouterConfig.{field_name} mixes the wildcard {WILDCARD!r} with explicit "
            f"entries {result!r}. Use either ['*'] or an explicit list."
        )
        raise ConfigurationError(msg)
    return result


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Cross-origin access policy for a router. Immutable after creation.

    Every field defaults to the wildcard (allow all). Override what you need::

        config = RouterConfig(
            origins=["https://example.com"],
            methods=["GET", "POST"],
            headers=["Content-Type", "Authorization"],
        )
    """

    origins: tuple[str, ...] = (WILDCARD,)
    methods: tuple[str, ...] = (WILDCARD,)
    headers: tuple[str, ...] = (WILDCARD,)

    def __post_init__(self) -> None:
        # Frozen: normalize lists into tuples through object.__setattr__
        for name in ("origins", "methods", "headers"):
            object.__setattr__(self, name, _normalize(name, getattr(self, name)))

    @property
    def allows_any_origin(self) -> bool:
        return self.origins == (WILDCARD,)
