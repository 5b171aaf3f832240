from __future__ import annotations

from typing import Any, Callable, Mapping, Optional

from ._parse import parse_cache_control, serialize_cache_control
from ._settings import DIRECTIVES, CacheControlSettings

__all__ = ("CacheControl",)


class _Serialize:
    """
    ``serialize`` bound two ways.

    On the class it takes the settings to serialize, on an instance it
    serializes the held settings:

        CacheControl.serialize({"max_age": 60})
        CacheControl(max_age=60).serialize()
    """

    def __get__(self, instance: Optional["CacheControl"], owner: type) -> Callable[..., str]:
        if instance is None:
            return serialize_cache_control

        def serialize() -> str:
            """Serialize the held settings into a Cache-Control header value."""
            return serialize_cache_control(instance.settings)

        return serialize


class CacheControl:
    """
    Cache-Control settings bundled with their header conversions.

    The given settings are copied, so mutating the caller's mapping later
    does not affect the instance. Keyword arguments are merged on top of
    the mapping.

    Examples:
        >>> cache_short = CacheControl(max_age=60, stale_while_revalidate=60)
        >>> cache_short.serialize()
        'max-age=60, stale-while-revalidate=60'
        >>> CacheControl.serialize({"no_store": True})
        'no-store'
        >>> CacheControl.parse("Cache-Control: no-store").settings
        {'no_store': True}
    """

    serialize = _Serialize()

    def __init__(self, settings: Optional[Mapping[str, Any]] = None, **directives: Any) -> None:
        self.settings: CacheControlSettings = {**(settings or {}), **directives}  # type: ignore

    @classmethod
    def parse(cls, header: Optional[str]) -> "CacheControl":
        return cls(parse_cache_control(header))

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, CacheControl) and self.serialize() == other.serialize()

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        fields = ""

        for directive in DIRECTIVES:
            value = self.settings.get(directive.name)
            if directive.is_numeric:
                if value is not None:
                    fields += f"{directive.name}={value}, "
            elif value is True:
                fields += f"{directive.name}, "

        fields = fields[:-2]

        return f"<{type(self).__name__} {fields}>" if fields else f"<{type(self).__name__}>"
