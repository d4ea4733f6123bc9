from flask import Blueprint, current_app, jsonify

from utils.auth_middleware import auth_required
from utils.validation import json_body, parse_id

asset_bp = Blueprint("assets", __name__)


def _assets():
    return current_app.extensions["asset_service"]


@asset_bp.get("/assets")
@auth_required
def list_assets():
    return jsonify(_assets().list_assets()), 200


@asset_bp.get("/assets/<asset_id>")
@auth_required
def get_asset(asset_id):
    return jsonify(_assets().get_asset(parse_id(asset_id, "Asset"))), 200


@asset_bp.post("/assets")
@auth_required
def create_asset():
    return jsonify(_assets().create_asset(json_body())), 201


@asset_bp.put("/assets/<asset_id>")
@auth_required
def update_asset(asset_id):
    asset_id = parse_id(asset_id, "Asset")
    return jsonify(_assets().update_asset(asset_id, json_body())), 200


@asset_bp.delete("/assets/<asset_id>")
@auth_required
def delete_asset(asset_id):
    _assets().delete_asset(parse_id(asset_id, "Asset"))
    return jsonify({"message": "Asset deleted successfully"}), 200
