from sqlalchemy import or_

from database import db
from models.base_model import RecordMixin, isoformat


class User(RecordMixin, db.Model):
    __tablename__ = "users"

    email = db.Column(db.String(255), unique=True, nullable=False)
    username = db.Column(db.String(20), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    first_name = db.Column(db.String(100), nullable=False, default="")
    last_name = db.Column(db.String(100), nullable=False, default="")
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    version = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def to_dict(self):
        # password_hash is never serialized
        return {
            "id": self.id,
            "email": self.email,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "is_active": self.is_active,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }


def create_user(email: str, username: str, password_hash: str, first_name: str = "", last_name: str = ""):
    user = User(
        email=email,
        username=username,
        password_hash=password_hash,
        first_name=first_name,
        last_name=last_name,
        is_active=True,
    )
    db.session.add(user)
    return user


def find_user_by_id(user_id: int):
    return User.get_active(user_id)


def find_user_by_email(email: str):
    return User.active().filter(User.email == email).first()


def find_user_by_email_or_username(email: str, username: str):
    return User.active().filter(or_(User.email == email, User.username == username)).first()


def list_users():
    return User.active().order_by(User.id).all()
