import logging

from ctrlcache import CacheControl, parse_cache_control

cache_short = CacheControl(max_age=60, stale_while_revalidate=60)
print(f"Cache-Control: {cache_short.serialize()}")

logging.basicConfig(level=logging.DEBUG)

# Unknown and malformed directives are dropped, see the DEBUG log lines.
print(parse_cache_control("Cache-Control: max-age=invalid, no-cache, s-maxage=12, x-custom"))
