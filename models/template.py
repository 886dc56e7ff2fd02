"""
Ingredient Template Model

A reusable sub-recipe (sauce, dough, spice mix) priced per unit of yield.
"""

from .base import db
from .ingredient import TemplateIngredient, utcnow


class IngredientTemplate(db.Model):
    """Sub-recipe with a total yield; cost_per_unit = plate cost / total_yield."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False, index=True)
    description = db.Column(db.Text, nullable=True)
    total_yield = db.Column(db.Float, default=0.0)
    yield_unit = db.Column(db.String(20), default='g')
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    ingredients = db.relationship('TemplateIngredient', backref='template', lazy=True,
                                  cascade='all, delete-orphan', order_by=TemplateIngredient.id)
