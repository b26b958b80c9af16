"""Domain errors raised by the portfolio services.

Services raise these; ``main.py`` maps them onto HTTP responses.
"""
from fastapi import Request, status
from fastapi.responses import JSONResponse


class PortfolioError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND


class PreconditionError(PortfolioError):
    """The draft/publish state does not allow the requested transition."""
    status_code = status.HTTP_409_CONFLICT


class PortfolioReferenceError(PortfolioError):
    """A child entry points at a portfolio version that does not exist."""
    status_code = status.HTTP_400_BAD_REQUEST


class PayloadValidationError(PortfolioError):
    status_code = 422


class ConflictError(PortfolioError):
    """A concurrent writer got there first (single-draft index violated)."""
    status_code = status.HTTP_409_CONFLICT


async def portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


__all__ = [
    "PortfolioError",
    "NotFoundError",
    "PreconditionError",
    "PortfolioReferenceError",
    "PayloadValidationError",
    "ConflictError",
    "portfolio_error_handler",
]
