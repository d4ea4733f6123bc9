"""
Transaction engine: validation, valuation and persistence of transactions.

``total_value`` is always ``amount * price`` computed with plain float
multiplication. No rounding or currency precision handling is applied.
"""

import logging
import math

from models.asset_model import find_asset_by_id
from models.transaction_model import Transaction, create_transaction, find_transaction_by_id, list_transactions
from services.common import commit
from utils.errors import AssetNotFound, NotFoundError, ValidationError
from utils.validation import (
    TRANSACTION_STATUSES,
    TRANSACTION_TYPES,
    require,
    validate_amount,
    validate_choice,
    validate_ref,
    validate_text,
)

logger = logging.getLogger(__name__)


def compute_total_value(amount: float, price: float) -> float:
    total = amount * price
    if not math.isfinite(total):
        raise ValidationError("total_value must be a finite number")
    return total


class TransactionEngine:

    def create_transaction(self, user_id: int, data: dict) -> dict:
        """Validate, value and store a transaction owned by ``user_id``.

        ``user_id`` comes from the authenticated token; any ``user_id`` in
        ``data`` is ignored. Returns the stored transaction with its user and
        asset embedded.
        """
        require(data, "asset_id", "type", "amount", "price")
        asset_id = validate_ref(data["asset_id"], "asset_id")
        tx_type = validate_choice(data["type"], "type", TRANSACTION_TYPES)
        amount = validate_amount(data["amount"], "amount")
        price = validate_amount(data["price"], "price")
        description = validate_text(data.get("description"), "description")

        logger.info("Transaction: create by user=%s asset=%s type=%s amount=%s", user_id, asset_id, tx_type, amount)

        if find_asset_by_id(asset_id) is None:
            logger.warning("Transaction: asset not found id=%s", asset_id)
            raise AssetNotFound()

        total_value = compute_total_value(amount, price)
        tx = create_transaction(user_id, asset_id, tx_type, amount, price, total_value, description)
        commit("create transaction")

        logger.info("Transaction: created id=%s total_value=%s", tx.id, tx.total_value)
        return self.get_transaction(tx.id)

    def update_transaction(self, transaction_id: int, data: dict) -> dict:
        """Apply the fields present in ``data``; absent fields are untouched.

        When ``amount`` or ``price`` is present, ``total_value`` is
        recomputed from the values stored after the update, so a price-only
        change reuses the stored amount.
        """
        tx = self._get_or_404(transaction_id)

        # Validate everything before touching the loaded row
        updates = {}
        if "type" in data:
            updates["type"] = validate_choice(data["type"], "type", TRANSACTION_TYPES)
        if "amount" in data:
            updates["amount"] = validate_amount(data["amount"], "amount")
        if "price" in data:
            updates["price"] = validate_amount(data["price"], "price")
        if "status" in data:
            updates["status"] = validate_choice(data["status"], "status", TRANSACTION_STATUSES)
        if "description" in data:
            updates["description"] = validate_text(data["description"], "description")

        if "amount" in updates or "price" in updates:
            updates["total_value"] = compute_total_value(
                updates.get("amount", tx.amount), updates.get("price", tx.price)
            )

        for field, value in updates.items():
            setattr(tx, field, value)

        if "total_value" in updates:
            logger.info("Transaction: recalculated total value for id=%s: %s", tx.id, tx.total_value)

        commit("update transaction")
        logger.info("Transaction: updated id=%s", tx.id)
        return self.get_transaction(tx.id)

    def get_transaction(self, transaction_id: int) -> dict:
        return self._get_or_404(transaction_id).to_dict()

    def list_transactions(self) -> list:
        return [tx.to_dict() for tx in list_transactions()]

    def delete_transaction(self, transaction_id: int):
        tx = self._get_or_404(transaction_id)
        tx.mark_deleted()
        commit("delete transaction")
        logger.info("Transaction: deleted id=%s type=%s amount=%s", tx.id, tx.type, tx.amount)

    # ---------- Helpers ----------

    @staticmethod
    def _get_or_404(transaction_id: int) -> Transaction:
        tx = find_transaction_by_id(transaction_id)
        if tx is None:
            raise NotFoundError("The requested transaction does not exist", error="Transaction not found")
        return tx
