from ctrlcache._cache_control import CacheControl as CacheControl
from ctrlcache._parse import (
    parse_cache_control as parse_cache_control,
    serialize_cache_control as serialize_cache_control,
)
from ctrlcache._settings import (
    DIRECTIVES as DIRECTIVES,
    CacheControlSetting as CacheControlSetting,
    CacheControlSettings as CacheControlSettings,
    Directive as Directive,
)

__all__ = (
    ## Facade
    "CacheControl",
    ## Codec
    "parse_cache_control",
    "serialize_cache_control",
    ## Schema
    "CacheControlSetting",
    "CacheControlSettings",
    "Directive",
    "DIRECTIVES",
)
