"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db

from .ingredient import DishIngredient, TemplateIngredient
from .dish import Dish, Category
from .template import IngredientTemplate
from .menu import Menu, MenuDish

__all__ = [
    'db',
    'DishIngredient',
    'TemplateIngredient',
    'Dish',
    'Category',
    'IngredientTemplate',
    'Menu',
    'MenuDish',
]
