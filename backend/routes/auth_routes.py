from flask import Blueprint, current_app, jsonify

from utils.validation import json_body

auth_bp = Blueprint("auth", __name__)


def _auth_service():
    return current_app.extensions["auth_service"]


@auth_bp.post("/register")
def register():
    result = _auth_service().register(json_body())
    return jsonify(result), 201


@auth_bp.post("/login")
def login():
    result = _auth_service().login(json_body())
    return jsonify(result), 200
