"""Client-facing errors raised by the auth and contact services."""

from fastapi import HTTPException, status


class Conflict(HTTPException):
    """A user with the given email already exists."""

    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists",
        )


class InvalidCredentials(HTTPException):
    """Unknown email or wrong password; the two cases are not told apart."""

    def __init__(self):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials",
        )


class Unauthorized(HTTPException):
    """Bearer token is missing, malformed, expired or badly signed."""

    def __init__(self):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
