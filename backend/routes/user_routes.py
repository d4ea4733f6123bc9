from flask import Blueprint, current_app, jsonify

from utils.auth_middleware import auth_required
from utils.validation import json_body, parse_id

user_bp = Blueprint("users", __name__)


def _users():
    return current_app.extensions["user_service"]


@user_bp.get("/users")
@auth_required
def list_users():
    return jsonify(_users().list_users()), 200


@user_bp.get("/users/<user_id>")
@auth_required
def get_user(user_id):
    return jsonify(_users().get_user(parse_id(user_id, "User"))), 200


@user_bp.put("/users/<user_id>")
@auth_required
def update_user(user_id):
    user_id = parse_id(user_id, "User")
    return jsonify(_users().update_user(user_id, json_body())), 200


@user_bp.delete("/users/<user_id>")
@auth_required
def delete_user(user_id):
    _users().delete_user(parse_id(user_id, "User"))
    return jsonify({"message": "User deleted successfully"}), 200
