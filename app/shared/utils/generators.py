"""ID generators: CUID2 primary keys and request correlation ids."""

import uuid

from cuid2 import cuid_wrapper

cuid_generator = cuid_wrapper()


def generate_cuid() -> str:
    """Generate a collision-resistant unique identifier (CUID2) for primary keys."""
    result = cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid_generator, got {type(result).__name__}"
        )
    return result


def new_correlation_id() -> str:
    """Generate a correlation id when the caller did not send one."""
    return uuid.uuid4().hex
