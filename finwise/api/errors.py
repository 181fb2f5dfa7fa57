"""Translate domain exceptions into HTTP errors"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from finwise.domain.exceptions import DataAPIError, InvalidInputError, UserNotFoundError


@contextmanager
def domain_errors(request_id: str) -> Iterator[None]:
    """
    Map domain failures to status codes:
    - UserNotFoundError -> 404
    - DataAPIError      -> 503
    - InvalidInputError -> 422
    - anything else     -> 500
    """
    try:
        yield
    except HTTPException:
        raise
    except UserNotFoundError as e:
        logging.warning(f"User not found: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=404, detail="User not found") from e
    except DataAPIError as e:
        logging.error(f"Finance data API error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=503, detail="Finance data service unavailable") from e
    except InvalidInputError as e:
        logging.warning(f"Invalid input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception as e:
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error") from e
