import logging

from models.user_model import create_user, find_user_by_email, find_user_by_email_or_username
from services.common import commit
from utils.errors import ConflictError, InvalidCredentials, ValidationError
from utils.validation import require, validate_email, validate_password, validate_text, validate_username

logger = logging.getLogger(__name__)


class AuthService:
    """Registration and login on top of the user store."""

    def __init__(self, password_hasher, token_service):
        self.hasher = password_hasher
        self.tokens = token_service

    def register(self, data: dict) -> dict:
        require(data, "email", "username", "password")
        email = validate_email(data["email"])
        username = validate_username(data["username"])
        password = validate_password(data["password"])
        first_name = validate_text(data.get("first_name"), "first_name")
        last_name = validate_text(data.get("last_name"), "last_name")

        # One combined check; the client is not told which field collided
        if find_user_by_email_or_username(email, username):
            logger.warning("Auth: registration conflict for email=%s username=%s", email, username)
            raise ConflictError("A user with this email or username already exists", error="User already exists")

        password_hash = self.hasher.hash(password)

        user = create_user(email, username, password_hash, first_name, last_name)
        # A concurrent registration, or a deleted user holding the name, trips the unique index
        commit("create user", conflict_message="A user with this email or username already exists")

        logger.info("Auth: registered user id=%s email=%s", user.id, user.email)
        return {"token": self.tokens.issue(user.id), "user": user.to_dict()}

    def login(self, data: dict) -> dict:
        require(data, "email", "password")
        email = validate_email(data["email"])
        password = data["password"]
        if not isinstance(password, str):
            raise ValidationError("password must be a string")

        try:
            user = find_user_by_email(email)
            if user is None:
                raise InvalidCredentials("unknown_email")
            if not user.is_active:
                raise InvalidCredentials("account_disabled")
            if not self.hasher.verify(user.password_hash, password):
                raise InvalidCredentials("bad_password")
        except InvalidCredentials as e:
            logger.warning("Auth: login failed for email=%s reason=%s", email, e.reason)
            raise

        logger.info("Auth: user id=%s logged in", user.id)
        return {"token": self.tokens.issue(user.id), "user": user.to_dict()}
