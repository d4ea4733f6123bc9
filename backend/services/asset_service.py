import logging

from models.asset_model import Asset, create_asset, find_asset_by_id, list_assets
from services.common import commit
from utils.errors import NotFoundError
from utils.validation import require, validate_amount, validate_flag, validate_text

logger = logging.getLogger(__name__)

SYMBOL_CONFLICT = "An asset with this symbol already exists"


class AssetService:

    def list_assets(self) -> list:
        assets = list_assets()
        logger.info("Asset: retrieved %d assets", len(assets))
        return [a.to_dict() for a in assets]

    def get_asset(self, asset_id: int) -> dict:
        return self._get_or_404(asset_id).to_dict()

    def create_asset(self, data: dict) -> dict:
        require(data, "name", "symbol", "type", "price")
        asset = create_asset(
            name=validate_text(data["name"], "name", required=True),
            symbol=validate_text(data["symbol"], "symbol", required=True),
            type=validate_text(data["type"], "type", required=True),
            price=validate_amount(data["price"], "price"),
            description=validate_text(data.get("description"), "description"),
        )
        commit("create asset", conflict_message=SYMBOL_CONFLICT)
        logger.info("Asset: created id=%s symbol=%s", asset.id, asset.symbol)
        return asset.to_dict()

    def update_asset(self, asset_id: int, data: dict) -> dict:
        asset = self._get_or_404(asset_id)

        updates = {}
        for field in ("name", "symbol", "type"):
            if field in data:
                updates[field] = validate_text(data[field], field, required=True)
        if "description" in data:
            updates["description"] = validate_text(data["description"], "description")
        if "price" in data:
            updates["price"] = validate_amount(data["price"], "price")
        if "is_active" in data:
            updates["is_active"] = validate_flag(data["is_active"], "is_active")

        for field, value in updates.items():
            setattr(asset, field, value)

        commit("update asset", conflict_message=SYMBOL_CONFLICT)
        logger.info("Asset: updated id=%s fields=%s", asset.id, sorted(updates))
        return asset.to_dict()

    def delete_asset(self, asset_id: int):
        asset = self._get_or_404(asset_id)
        asset.mark_deleted()
        commit("delete asset")
        logger.info("Asset: deleted id=%s symbol=%s", asset.id, asset.symbol)

    @staticmethod
    def _get_or_404(asset_id: int) -> Asset:
        asset = find_asset_by_id(asset_id)
        if asset is None:
            raise NotFoundError("The requested asset does not exist", error="Asset not found")
        return asset
