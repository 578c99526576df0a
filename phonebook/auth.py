"""Authentication and authorization related routes and helpers."""

import logging
from datetime import datetime, timedelta, timezone

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from . import schemas, crud
from .core import get_settings
from .database import get_db
from .errors import Conflict, InvalidCredentials, Unauthorized

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().BCRYPT_ROUNDS,
)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)
router = APIRouter(prefix="/api/auth", tags=["auth"])


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Compare a plain password with its hashed value."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Generate a password hash using the configured context."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT access token identifying ``user_id``."""
    settings = get_settings()
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode = {"sub": str(user_id), "iat": issued_at, "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> int:
    """
    Validate a JWT access token and return the user id it carries.

    Args:
        token (str): Encoded JWT.

    Raises:
        Unauthorized: If the token is malformed, expired, signed with
            another key or carries no numeric subject.

    Returns:
        int: Identifier of the token's user.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
    except JWTError:
        raise Unauthorized()
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject.isdecimal():
        raise Unauthorized()
    return int(subject)


def get_current_user_id(
    request: Request, token: str | None = Depends(oauth2_scheme)
) -> int:
    """Dependency that authenticates the bearer token and returns the user id.

    The id is also stored on ``request.state.user_id``.
    """
    if token is None:
        raise Unauthorized()
    user_id = decode_access_token(token)
    request.state.user_id = user_id
    return user_id


class AuthService:
    """Signup and login against the credential store held by ``db``."""

    def __init__(self, db: Session):
        self.db = db

    def _issue(self, user) -> schemas.AuthResponse:
        return schemas.AuthResponse(
            token=create_access_token(user.id),
            user=schemas.UserOut(id=user.id, email=user.email),
        )

    def signup(self, email: str, password: str) -> schemas.AuthResponse:
        """
        Register a new user and issue a token for it.

        Args:
            email (str): Email address, compared case-insensitively.
            password (str): Plain text password; only its hash is stored.

        Raises:
            Conflict: If the email is already registered.

        Returns:
            AuthResponse: Token and public view of the new user.
        """
        email = email.lower()
        if crud.get_user_by_email(self.db, email) is not None:
            logger.info("Signup rejected, email already registered: %s", email)
            raise Conflict()
        user = crud.create_user(self.db, email, get_password_hash(password))
        logger.info("Registered user %s (id=%s)", user.email, user.id)
        return self._issue(user)

    def login(self, email: str, password: str) -> schemas.AuthResponse:
        """
        Check credentials and issue a token.

        Unknown email and wrong password raise the same error and both run
        one bcrypt verification.

        Raises:
            InvalidCredentials: If the credentials do not match a user.
        """
        user = crud.get_user_by_email(self.db, email.lower())
        if user is None:
            pwd_context.dummy_verify()
            valid = False
        else:
            valid = verify_password(password, user.hashed_password)
        if not valid:
            logger.warning("Failed login attempt for %s", email)
            raise InvalidCredentials()
        return self._issue(user)


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    """Dependency building an ``AuthService`` bound to the request session."""
    return AuthService(db)


@router.post(
    "/signup",
    response_model=schemas.AuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def signup(
    credentials: schemas.Credentials,
    service: AuthService = Depends(get_auth_service),
):
    """Register a new user and return an access token."""

    return service.signup(credentials.email, credentials.password)


@router.post("/login", response_model=schemas.AuthResponse)
def login(
    credentials: schemas.Credentials,
    service: AuthService = Depends(get_auth_service),
):
    """Authenticate user and return an access token."""

    return service.login(credentials.email, credentials.password)
