import logging

from models.user_model import User, find_user_by_id, list_users
from services.common import commit
from utils.errors import NotFoundError
from utils.validation import validate_email, validate_flag, validate_text, validate_username

logger = logging.getLogger(__name__)


class UserService:

    def list_users(self) -> list:
        users = list_users()
        logger.info("User: retrieved %d users", len(users))
        return [u.to_dict() for u in users]

    def get_user(self, user_id: int) -> dict:
        return self._get_or_404(user_id).to_dict()

    def update_user(self, user_id: int, data: dict) -> dict:
        user = self._get_or_404(user_id)

        updates = {}
        if "email" in data:
            updates["email"] = validate_email(data["email"])
        if "username" in data:
            updates["username"] = validate_username(data["username"])
        if "first_name" in data:
            updates["first_name"] = validate_text(data["first_name"], "first_name")
        if "last_name" in data:
            updates["last_name"] = validate_text(data["last_name"], "last_name")
        if "is_active" in data:
            updates["is_active"] = validate_flag(data["is_active"], "is_active")

        for field, value in updates.items():
            setattr(user, field, value)

        commit("update user", conflict_message="A user with this email or username already exists")
        logger.info("User: updated id=%s fields=%s", user.id, sorted(updates))
        return user.to_dict()

    def delete_user(self, user_id: int):
        user = self._get_or_404(user_id)
        user.mark_deleted()
        commit("delete user")
        logger.info("User: deleted id=%s email=%s", user.id, user.email)

    @staticmethod
    def _get_or_404(user_id: int) -> User:
        user = find_user_by_id(user_id)
        if user is None:
            raise NotFoundError("The requested user does not exist", error="User not found")
        return user
