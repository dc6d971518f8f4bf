from contextlib import contextmanager

from fastapi import HTTPException

from meme_relay.shared import Logger

__all__ = ["INTERNAL_SERVER_ERROR", "server_error_handler"]

logger = Logger(__name__).get_logger()

INTERNAL_SERVER_ERROR = "Internal server error"


@contextmanager
def server_error_handler(stacklevel=1):
    """Turn any failure inside the block into a detail-free 500.

    The specific error is logged against the caller, never sent to the client.
    """
    # Go 3 levels up to escape @contextmanager methods and current function
    stack_level = 2 + stacklevel
    kw = {"stacklevel": stack_level}
    try:
        yield

    except HTTPException:
        raise

    except Exception as e:
        logger.error("Failed to process request: %s", e, **kw)
        raise HTTPException(status_code=500, detail=INTERNAL_SERVER_ERROR) from e
