"""
Menu Models

Contains the Menu model and its ordered dish links.
"""

from .base import db
from .ingredient import utcnow


class MenuDish(db.Model):
    """Places a dish on a menu at a display position."""
    __table_args__ = (db.UniqueConstraint('menu_id', 'dish_id', name='uq_menu_dish_menu_dish'),)

    id = db.Column(db.Integer, primary_key=True)
    menu_id = db.Column(db.Integer, db.ForeignKey('menu.id', ondelete='CASCADE'), nullable=False, index=True)
    dish_id = db.Column(db.Integer, db.ForeignKey('dish.id', ondelete='CASCADE'), nullable=False, index=True)
    display_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)

    dish = db.relationship('Dish', back_populates='menu_links')


class Menu(db.Model):
    """Named collection of dishes."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    dish_links = db.relationship('MenuDish', backref='menu', lazy=True, cascade='all, delete-orphan',
                                 order_by=[MenuDish.display_order, MenuDish.id])
