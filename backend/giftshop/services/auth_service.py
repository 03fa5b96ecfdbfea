"""
Authentication service for registration and login.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from giftshop.core.exceptions import DuplicateEmail, InvalidCredentials, StorageError
from giftshop.core.security import PasswordHasher, TokenIssuer
from giftshop.database.giftshop_db import Collections
from giftshop.models.user import User
from giftshop.schemas.auth import LoginRequest, RegisterRequest, TokenResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        tokens: TokenIssuer,
        passwords: PasswordHasher,
    ):
        """Initialize with the gift shop database and security primitives."""
        self.db = db
        self.users_collection = db[Collections.USERS]
        self.tokens = tokens
        self.passwords = passwords

    async def register_user(self, request: RegisterRequest) -> TokenResponse:
        """
        Register a new user and issue a token for it.

        Duplicate emails are caught by the unique index on insert rather than
        by a lookup beforehand, so concurrent registrations cannot both win.

        Args:
            request: Registration request with name, email and password

        Returns:
            TokenResponse for the created user

        Raises:
            DuplicateEmail: If the email is already registered
            StorageError: If the insert fails for any other reason
        """
        user = User(
            name=request.name,
            email=request.email,
            hashed_password=await self.passwords.hash(request.password),
        )

        try:
            result = await self.users_collection.insert_one(
                user.model_dump(exclude={"id"})
            )
        except DuplicateKeyError as e:
            logger.warning("Registration rejected, email already registered: %s", request.email)
            raise DuplicateEmail() from e
        except PyMongoError as e:
            logger.exception("Failed to store user %s", request.email)
            raise StorageError() from e

        user_id = str(result.inserted_id)
        logger.info("Registered user %s", user_id)

        return TokenResponse(token=self.tokens.issue(user_id))

    async def login(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and return a fresh JWT token.

        Tokens issued earlier stay valid until they expire.

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse with a new JWT token

        Raises:
            InvalidCredentials: If the email is unknown or the password is wrong
            StorageError: If the user lookup fails
        """
        try:
            user_doc = await self.users_collection.find_one({"email": request.email})
        except PyMongoError as e:
            logger.exception("Failed to look up user %s", request.email)
            raise StorageError() from e

        if not user_doc:
            raise InvalidCredentials()

        if not await self.passwords.verify(request.password, user_doc["hashed_password"]):
            raise InvalidCredentials()

        user_id = str(user_doc["_id"])
        logger.info("User %s logged in", user_id)

        return TokenResponse(token=self.tokens.issue(user_id))
