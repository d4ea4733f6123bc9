from database import db
from models.base_model import RecordMixin, isoformat


class Transaction(RecordMixin, db.Model):
    __tablename__ = "transactions"

    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    asset_id = db.Column(db.Integer, db.ForeignKey("assets.id"), nullable=False, index=True)
    type = db.Column(db.String(16), nullable=False)  # buy | sell | transfer
    amount = db.Column(db.Float, nullable=False)
    price = db.Column(db.Float, nullable=False)  # price per unit at transaction time
    total_value = db.Column(db.Float, nullable=False)
    status = db.Column(db.String(16), nullable=False, default="pending")
    description = db.Column(db.Text, nullable=False, default="")
    version = db.Column(db.Integer, nullable=False)

    # Read-only; the row itself only stores the foreign keys
    user = db.relationship("User", lazy="joined", viewonly=True)
    asset = db.relationship("Asset", lazy="joined", viewonly=True)

    __mapper_args__ = {"version_id_col": version}

    def to_dict(self):
        user = self.user if self.user is not None and not self.user.is_deleted else None
        asset = self.asset if self.asset is not None and not self.asset.is_deleted else None
        return {
            "id": self.id,
            "user_id": self.user_id,
            "asset_id": self.asset_id,
            "type": self.type,
            "amount": self.amount,
            "price": self.price,
            "total_value": self.total_value,
            "status": self.status,
            "description": self.description,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
            "user": user.to_dict() if user else None,
            "asset": asset.to_dict() if asset else None,
        }


def create_transaction(user_id: int, asset_id: int, type: str, amount: float, price: float,
                       total_value: float, description: str = ""):
    tx = Transaction(
        user_id=user_id,
        asset_id=asset_id,
        type=type,
        amount=amount,
        price=price,
        total_value=total_value,
        status="pending",
        description=description,
    )
    db.session.add(tx)
    return tx


def find_transaction_by_id(transaction_id: int):
    return Transaction.get_active(transaction_id)


def list_transactions():
    return Transaction.active().order_by(Transaction.id).all()
