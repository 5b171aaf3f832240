from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple, Union

from typing_extensions import TypedDict

__all__ = (
    "CacheControlSetting",
    "CacheControlSettings",
    "Directive",
    "DIRECTIVES",
    "DIRECTIVES_BY_TOKEN",
)

Number = Union[int, float]


class CacheControlSettings(TypedDict, total=False):
    """
    Cache-Control directives keyed by their Python name.

    Only present keys carry meaning: a missing numeric directive is "not set"
    (not zero) and a missing flag is the same as ``False``.

    Supported Directives:
    - max-age [RFC9111, Section 5.2.1.1, 5.2.2.1]
    - s-maxage [RFC9111, Section 5.2.2.10]
    - max-stale [RFC9111, Section 5.2.1.2]
    - min-fresh [RFC9111, Section 5.2.1.3]
    - must-revalidate [RFC9111, Section 5.2.2.2]
    - no-cache [RFC9111, Section 5.2.1.4, 5.2.2.4]
    - no-store [RFC9111, Section 5.2.1.5, 5.2.2.5]
    - no-transform [RFC9111, Section 5.2.1.6, 5.2.2.6]
    - only-if-cached [RFC9111, Section 5.2.1.7]
    - public [RFC9111, Section 5.2.2.9]
    - private [RFC9111, Section 5.2.2.7]
    - proxy-revalidate [RFC9111, Section 5.2.2.8]
    - stale-while-revalidate [RFC5861, Section 3]
    - stale-if-error [RFC5861, Section 4]
    """

    # Seconds a response stays fresh.
    max_age: Optional[Number]
    # Same as max_age, for shared caches (CDNs, proxies) only.
    s_maxage: Optional[Number]
    # Seconds of staleness the client is willing to accept.
    max_stale: Optional[Number]
    # Seconds the response must still be fresh for.
    min_fresh: Optional[Number]
    must_revalidate: bool
    no_cache: bool
    no_store: bool
    no_transform: bool
    only_if_cached: bool
    public: bool
    private: bool
    proxy_revalidate: bool
    # Seconds a stale response may be served while revalidating in background.
    stale_while_revalidate: Optional[Number]
    # Seconds a stale response may be served when the origin errors.
    stale_if_error: Optional[Number]


CacheControlSetting = Literal[
    "max_age",
    "s_maxage",
    "max_stale",
    "min_fresh",
    "must_revalidate",
    "no_cache",
    "no_store",
    "no_transform",
    "only_if_cached",
    "public",
    "private",
    "proxy_revalidate",
    "stale_while_revalidate",
    "stale_if_error",
]

DirectiveKind = Literal["numeric", "flag"]


@dataclass(frozen=True)
class Directive:
    name: CacheControlSetting
    token: str
    kind: DirectiveKind

    @property
    def is_numeric(self) -> bool:
        return self.kind == "numeric"


# Emission order of the serializer. Not alphabetical and not grouped by kind;
# existing consumers compare header text byte for byte.
DIRECTIVES: Tuple[Directive, ...] = (
    Directive("max_age", "max-age", "numeric"),
    Directive("s_maxage", "s-maxage", "numeric"),
    Directive("max_stale", "max-stale", "numeric"),
    Directive("min_fresh", "min-fresh", "numeric"),
    Directive("must_revalidate", "must-revalidate", "flag"),
    Directive("no_cache", "no-cache", "flag"),
    Directive("no_store", "no-store", "flag"),
    Directive("no_transform", "no-transform", "flag"),
    Directive("only_if_cached", "only-if-cached", "flag"),
    Directive("public", "public", "flag"),
    Directive("private", "private", "flag"),
    Directive("proxy_revalidate", "proxy-revalidate", "flag"),
    Directive("stale_while_revalidate", "stale-while-revalidate", "numeric"),
    Directive("stale_if_error", "stale-if-error", "numeric"),
)

DIRECTIVES_BY_TOKEN: Dict[str, Directive] = {directive.token: directive for directive in DIRECTIVES}
