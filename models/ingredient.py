"""
Ingredient Entry Models

Columns shared by every ingredient line, whether it belongs to a dish or
to an ingredient template.
"""

from datetime import datetime, timezone

from .base import db


def utcnow():
    return datetime.now(timezone.utc)


class IngredientEntryMixin:
    """
    One priced ingredient line.

    Pricing:
    - Package: package_cost for package_size package_unit; the quantity used
      is prorated through grams (e.g. $10 per 1 KG bag, 50 G used -> $0.50)
    - Direct: unit_cost * quantity, used when package fields are empty

    Line costs are always derived (services.cost), never stored.
    """
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)

    # Direct pricing: cost per ONE unit
    unit_cost = db.Column(db.Float, default=0.0)

    # Quantity used and its unit (g, kg, oz, lb, ml, fl oz)
    quantity = db.Column(db.Float, default=0.0)
    unit = db.Column(db.String(20), default='g')

    # Package pricing
    package_cost = db.Column(db.Float, nullable=True)
    package_size = db.Column(db.Float, nullable=True)
    package_unit = db.Column(db.String(20), nullable=True)

    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'unit_cost': self.unit_cost,
            'quantity': self.quantity,
            'unit': self.unit,
            'package_cost': self.package_cost,
            'package_size': self.package_size,
            'package_unit': self.package_unit,
        }


class DishIngredient(IngredientEntryMixin, db.Model):
    """Ingredient line owned by a dish."""
    dish_id = db.Column(db.Integer, db.ForeignKey('dish.id', ondelete='CASCADE'), nullable=False, index=True)


class TemplateIngredient(IngredientEntryMixin, db.Model):
    """Ingredient line owned by an ingredient template."""
    template_id = db.Column(db.Integer, db.ForeignKey('ingredient_template.id', ondelete='CASCADE'),
                            nullable=False, index=True)
