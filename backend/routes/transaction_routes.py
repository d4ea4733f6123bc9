from flask import Blueprint, current_app, jsonify

from utils.auth_middleware import auth_required, current_user_id
from utils.validation import json_body, parse_id

transaction_bp = Blueprint("transactions", __name__)


def _engine():
    return current_app.extensions["transaction_engine"]


@transaction_bp.get("/transactions")
@auth_required
def list_transactions():
    return jsonify(_engine().list_transactions()), 200


@transaction_bp.get("/transactions/<transaction_id>")
@auth_required
def get_transaction(transaction_id):
    return jsonify(_engine().get_transaction(parse_id(transaction_id, "Transaction"))), 200


@transaction_bp.post("/transactions")
@auth_required
def create_transaction():
    # Owner always comes from the token, never from the body
    tx = _engine().create_transaction(current_user_id(), json_body())
    return jsonify(tx), 201


@transaction_bp.put("/transactions/<transaction_id>")
@auth_required
def update_transaction(transaction_id):
    transaction_id = parse_id(transaction_id, "Transaction")
    return jsonify(_engine().update_transaction(transaction_id, json_body())), 200


@transaction_bp.delete("/transactions/<transaction_id>")
@auth_required
def delete_transaction(transaction_id):
    _engine().delete_transaction(parse_id(transaction_id, "Transaction"))
    return jsonify({"message": "Transaction deleted successfully"}), 200
