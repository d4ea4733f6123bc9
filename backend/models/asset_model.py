from database import db
from models.base_model import RecordMixin, isoformat


class Asset(RecordMixin, db.Model):
    __tablename__ = "assets"

    name = db.Column(db.String(255), nullable=False)
    symbol = db.Column(db.String(32), unique=True, nullable=False)
    type = db.Column(db.String(64), nullable=False)  # e.g. "cryptocurrency", "stock"
    description = db.Column(db.Text, nullable=False, default="")
    price = db.Column(db.Float, nullable=False)
    is_active = db.Column(db.Boolean, nullable=False, default=True)
    version = db.Column(db.Integer, nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "symbol": self.symbol,
            "type": self.type,
            "description": self.description,
            "price": self.price,
            "is_active": self.is_active,
            "created_at": isoformat(self.created_at),
            "updated_at": isoformat(self.updated_at),
        }


def create_asset(name: str, symbol: str, type: str, price: float, description: str = ""):
    asset = Asset(
        name=name,
        symbol=symbol,
        type=type,
        price=price,
        description=description,
        is_active=True,
    )
    db.session.add(asset)
    return asset


def find_asset_by_id(asset_id: int):
    return Asset.get_active(asset_id)


def list_assets():
    return Asset.active().order_by(Asset.id).all()
