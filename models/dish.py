"""
Dish Models

Contains the Dish and Category models.
"""

from .base import db
from .ingredient import DishIngredient, utcnow


class Category(db.Model):
    """Dish category with display color and ordering."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    color = db.Column(db.String(7), default='#9333EA')
    display_order = db.Column(db.Integer, default=0, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color,
            'display_order': self.display_order,
        }


class Dish(db.Model):
    """
    A menu dish built from ingredient lines.

    target_margin is the target food cost percentage (30 = 30%), not a
    profit margin. Plate cost, suggested price and food cost % are
    recomputed from the ingredients on every read.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    target_margin = db.Column(db.Float, default=30.0)
    selling_price = db.Column(db.Float, nullable=True)
    category_id = db.Column(db.Integer, db.ForeignKey('category.id', ondelete='SET NULL'), nullable=True, index=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    category = db.relationship('Category', backref='dishes')
    ingredients = db.relationship('DishIngredient', backref='dish', lazy=True,
                                  cascade='all, delete-orphan', order_by=DishIngredient.id)
    menu_links = db.relationship('MenuDish', back_populates='dish', cascade='all, delete-orphan')
