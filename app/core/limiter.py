"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Mutating lifecycle routes are limited;
reads are not.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

WRITE_ENDPOINT_LIMIT = "120/minute"
# Each deletion runs a fifteen-step cascade; keep bursts small.
DELETE_ENDPOINT_LIMIT = "20/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_deletes = limiter.limit(DELETE_ENDPOINT_LIMIT)
