"""
Store Service

CRUD operations over dishes, ingredient templates, categories and menus.

Every operation returns a Result(data, error, code) instead of raising, so
callers can branch on `result.error`. Costs are never stored: serialized
dishes and templates carry values recomputed from their current ingredients.
"""

import functools
import logging
from collections import namedtuple

from sqlalchemy.exc import SQLAlchemyError

from constants import (
    MAX_LENGTHS, DEFAULT_CATEGORY_COLOR, DEFAULT_UNIT, VALID_UNITS, MAX_DB_INTEGER,
)
from models import (
    db, Dish, DishIngredient, IngredientTemplate, TemplateIngredient,
    Category, Menu, MenuDish,
)
from utils.sanitizer import sanitize_name, sanitize_text, sanitize_color
from .cost import (
    DEFAULT_TARGET_MARGIN,
    safe_float,
    summarize_dish,
    calculate_plate_cost,
    calculate_ingredient_entry_cost,
    calculate_template_cost_per_unit,
)
from .units import normalize_unit

logger = logging.getLogger(__name__)

Result = namedtuple('Result', ['data', 'error', 'code'], defaults=[None, None, None])

NOT_FOUND = 'not_found'
INVALID = 'invalid'
DATABASE = 'database'


class ValidationError(ValueError):
    """Raised internally when a payload cannot be saved."""
    pass


def _ok(data):
    return Result(data=data)


def _not_found(what):
    return Result(error=f'{what} not found', code=NOT_FOUND)


def store_operation(action):
    """
    Wrap a store function so failures come back as a Result.

    Validation errors and integers too large for the database become
    INVALID results; database errors are logged, rolled back and become
    DATABASE results.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ValidationError as e:
                db.session.rollback()
                return Result(error=str(e), code=INVALID)
            except OverflowError:
                db.session.rollback()
                return Result(error='Value out of range', code=INVALID)
            except SQLAlchemyError as e:
                db.session.rollback()
                logger.exception("Error %s", action)
                return Result(error=f'Error {action}: {e.__class__.__name__}', code=DATABASE)
        return wrapper
    return decorator


# ============================================
# SERIALIZATION
# ============================================

def serialize_ingredient(entry):
    data = entry.to_dict()
    data['cost'] = calculate_ingredient_entry_cost(entry)
    return data


def serialize_dish(dish):
    data = {
        'id': dish.id,
        'name': dish.name,
        'target_margin': dish.target_margin,
        'selling_price': dish.selling_price,
        'category_id': dish.category_id,
        'category': dish.category.to_dict() if dish.category else None,
        'ingredients': [serialize_ingredient(ing) for ing in dish.ingredients],
    }
    data.update(summarize_dish(dish))
    return data


def serialize_template(template):
    return {
        'id': template.id,
        'name': template.name,
        'description': template.description,
        'total_yield': template.total_yield,
        'yield_unit': template.yield_unit,
        'ingredients': [serialize_ingredient(ing) for ing in template.ingredients],
        'total_cost': calculate_plate_cost(template.ingredients),
        'cost_per_unit': calculate_template_cost_per_unit(template),
    }


def serialize_menu(menu):
    dishes = []
    for link in menu.dish_links:
        if not link.dish:
            continue
        dish = serialize_dish(link.dish)
        dish['menu_dish_id'] = link.id
        dish['display_order'] = link.display_order
        dishes.append(dish)
    return {
        'id': menu.id,
        'name': menu.name,
        'description': menu.description,
        'dishes': dishes,
    }


# ============================================
# PAYLOAD PARSING
# ============================================

def _required_name(value, field, max_length):
    name = sanitize_name(value, max_length=max_length)
    if not name:
        raise ValidationError(f'{field} is required')
    return name


def _parse_unit(value, field, default=None):
    if value in (None, ''):
        return default
    if str(value).strip().lower() not in VALID_UNITS:
        raise ValidationError(f'Invalid {field}: {value}')
    return normalize_unit(value)


def _parse_int(value, field):
    """Whole number for an id or display order, rejecting values SQLite cannot store."""
    number = safe_float(value)
    if abs(number) > MAX_DB_INTEGER:
        raise ValidationError(f'{field} is out of range: {value}')
    return int(number)


def _optional_float(value):
    """Empty/zero package fields are stored as NULL so direct pricing applies."""
    number = safe_float(value)
    return number or None


def build_ingredient_entries(model, raw_ingredients):
    """
    Build ingredient rows from request payload dicts.

    Raises:
        ValidationError: on a missing name or an unrecognized unit
    """
    entries = []
    for raw in raw_ingredients or []:
        if not isinstance(raw, dict):
            raise ValidationError('Each ingredient must be an object')
        entries.append(model(
            name=_required_name(raw.get('name'), 'Ingredient name', MAX_LENGTHS['ingredient_name']),
            unit_cost=safe_float(raw.get('unit_cost')),
            quantity=safe_float(raw.get('quantity')),
            unit=_parse_unit(raw.get('unit'), 'unit', DEFAULT_UNIT),
            package_cost=_optional_float(raw.get('package_cost')),
            package_size=_optional_float(raw.get('package_size')),
            package_unit=_parse_unit(raw.get('package_unit'), 'package unit'),
        ))
    return entries


# ============================================
# DISHES
# ============================================

@store_operation('fetching dishes')
def fetch_dishes():
    dishes = Dish.query.order_by(Dish.created_at.desc(), Dish.id.desc()).all()
    return _ok([serialize_dish(d) for d in dishes])


@store_operation('fetching dish')
def fetch_dish(dish_id):
    dish = db.session.get(Dish, dish_id)
    if not dish:
        return _not_found('Dish')
    return _ok(serialize_dish(dish))


def _resolve_category_id(value):
    if value in (None, ''):
        return None
    category = db.session.get(Category, _parse_int(value, 'Category id'))
    if not category:
        raise ValidationError(f'Category {value} does not exist')
    return category.id


@store_operation('saving dish')
def save_dish(dish_data):
    """
    Create or update a dish with its ingredients.

    When dish_data has an id the dish is updated and its ingredient list
    replaced wholesale.
    """
    dish_id = dish_data.get('id')
    if dish_id:
        dish = db.session.get(Dish, dish_id)
        if not dish:
            return _not_found('Dish')
    else:
        dish = Dish()

    dish.name = _required_name(dish_data.get('name'), 'Dish name', MAX_LENGTHS['dish_name'])
    dish.target_margin = safe_float(dish_data.get('target_margin'), default=DEFAULT_TARGET_MARGIN)
    selling_price = dish_data.get('selling_price')
    dish.selling_price = None if selling_price in (None, '') else safe_float(selling_price)
    dish.category_id = _resolve_category_id(dish_data.get('category_id'))
    dish.ingredients = build_ingredient_entries(DishIngredient, dish_data.get('ingredients'))

    db.session.add(dish)
    db.session.commit()
    return fetch_dish(dish.id)


@store_operation('deleting dish')
def delete_dish(dish_id):
    dish = db.session.get(Dish, dish_id)
    if not dish:
        return _not_found('Dish')
    db.session.delete(dish)
    db.session.commit()
    logger.info("Deleted dish %s", dish_id)
    return _ok(True)


# ============================================
# INGREDIENT TEMPLATES
# ============================================

@store_operation('fetching templates')
def fetch_templates():
    templates = IngredientTemplate.query.order_by(IngredientTemplate.name).all()
    return _ok([serialize_template(t) for t in templates])


@store_operation('fetching template')
def fetch_template(template_id):
    template = db.session.get(IngredientTemplate, template_id)
    if not template:
        return _not_found('Template')
    return _ok(serialize_template(template))


@store_operation('saving template')
def save_template(template_data):
    """Create or update an ingredient template, replacing its ingredient list."""
    template_id = template_data.get('id')
    if template_id:
        template = db.session.get(IngredientTemplate, template_id)
        if not template:
            return _not_found('Template')
    else:
        template = IngredientTemplate()

    template.name = _required_name(template_data.get('name'), 'Template name', MAX_LENGTHS['template_name'])
    template.description = sanitize_text(template_data.get('description'),
                                         max_length=MAX_LENGTHS['description']) or None
    template.total_yield = safe_float(template_data.get('total_yield'))
    template.yield_unit = _parse_unit(template_data.get('yield_unit'), 'yield unit', DEFAULT_UNIT)
    template.ingredients = build_ingredient_entries(TemplateIngredient, template_data.get('ingredients'))

    db.session.add(template)
    db.session.commit()
    return fetch_template(template.id)


def import_invoice_ingredients(ingredients):
    """
    Save approved invoice ingredients, one single-ingredient template each.

    Each template yields 1 of the ingredient's unit, so its cost per unit is
    the invoice price. Failures are collected rather than aborting the batch.

    Returns:
        Result with {'saved': [template, ...], 'failed': [{'name', 'error'}, ...]}
    """
    saved, failed = [], []
    for ingredient in ingredients:
        unit = ingredient.get('unit') or DEFAULT_UNIT
        result = save_template({
            'name': ingredient.get('name'),
            'description': f"Imported from invoice - ${safe_float(ingredient.get('unit_cost')):.2f} per {unit}",
            'total_yield': 1,
            'yield_unit': unit,
            'ingredients': [ingredient],
        })
        if result.error:
            failed.append({'name': ingredient.get('name'), 'error': result.error})
        else:
            saved.append(result.data)
    if failed:
        logger.warning("Imported %d invoice ingredient(s), %d failed", len(saved), len(failed))
    return _ok({'saved': saved, 'failed': failed})


@store_operation('deleting template')
def delete_template(template_id):
    template = db.session.get(IngredientTemplate, template_id)
    if not template:
        return _not_found('Template')
    db.session.delete(template)
    db.session.commit()
    return _ok(True)


# ============================================
# CATEGORIES
# ============================================

@store_operation('fetching categories')
def fetch_categories():
    categories = Category.query.order_by(Category.display_order, Category.name).all()
    return _ok([c.to_dict() for c in categories])


@store_operation('creating category')
def create_category(category_data):
    category = Category(
        name=_required_name(category_data.get('name'), 'Category name', MAX_LENGTHS['category_name']),
        color=sanitize_color(category_data.get('color'), DEFAULT_CATEGORY_COLOR),
        display_order=_parse_int(category_data.get('display_order'), 'Display order'),
    )
    db.session.add(category)
    db.session.commit()
    return _ok(category.to_dict())


@store_operation('updating category')
def update_category(category_id, category_data):
    category = db.session.get(Category, category_id)
    if not category:
        return _not_found('Category')
    if 'name' in category_data:
        category.name = _required_name(category_data.get('name'), 'Category name', MAX_LENGTHS['category_name'])
    if 'color' in category_data:
        category.color = sanitize_color(category_data.get('color'), category.color)
    if 'display_order' in category_data:
        category.display_order = _parse_int(category_data.get('display_order'), 'Display order')
    db.session.commit()
    return _ok(category.to_dict())


@store_operation('deleting category')
def delete_category(category_id):
    category = db.session.get(Category, category_id)
    if not category:
        return _not_found('Category')
    # Dishes stay, uncategorized
    Dish.query.filter_by(category_id=category_id).update({'category_id': None})
    db.session.delete(category)
    db.session.commit()
    return _ok(True)


@store_operation('updating category order')
def update_category_order(category_orders):
    """Apply [{id, display_order}, ...] in one transaction."""
    for entry in category_orders or []:
        category = db.session.get(Category, _parse_int(entry.get('id'), 'Category id'))
        if not category:
            raise ValidationError(f"Category {entry.get('id')} does not exist")
        category.display_order = _parse_int(entry.get('display_order'), 'Display order')
    db.session.commit()
    return _ok(True)


# ============================================
# MENUS
# ============================================

@store_operation('fetching menus')
def fetch_menus():
    menus = Menu.query.order_by(Menu.created_at.desc(), Menu.id.desc()).all()
    return _ok([serialize_menu(m) for m in menus])


@store_operation('fetching menu')
def fetch_menu(menu_id):
    menu = db.session.get(Menu, menu_id)
    if not menu:
        return _not_found('Menu')
    return _ok(serialize_menu(menu))


@store_operation('creating menu')
def create_menu(menu_data):
    menu = Menu(
        name=_required_name(menu_data.get('name'), 'Menu name', MAX_LENGTHS['menu_name']),
        description=sanitize_text(menu_data.get('description'), max_length=MAX_LENGTHS['description']) or None,
    )
    db.session.add(menu)
    db.session.commit()
    return _ok(serialize_menu(menu))


@store_operation('updating menu')
def update_menu(menu_id, menu_data):
    menu = db.session.get(Menu, menu_id)
    if not menu:
        return _not_found('Menu')
    menu.name = _required_name(menu_data.get('name'), 'Menu name', MAX_LENGTHS['menu_name'])
    menu.description = sanitize_text(menu_data.get('description'), max_length=MAX_LENGTHS['description']) or None
    db.session.commit()
    return _ok(serialize_menu(menu))


@store_operation('deleting menu')
def delete_menu(menu_id):
    menu = db.session.get(Menu, menu_id)
    if not menu:
        return _not_found('Menu')
    db.session.delete(menu)
    db.session.commit()
    return _ok(True)


@store_operation('adding dish to menu')
def add_dish_to_menu(menu_id, dish_id, display_order=0):
    menu = db.session.get(Menu, menu_id)
    if not menu:
        return _not_found('Menu')
    dish = db.session.get(Dish, _parse_int(dish_id, 'Dish id'))
    if not dish:
        return _not_found('Dish')
    if MenuDish.query.filter_by(menu_id=menu.id, dish_id=dish.id).first():
        raise ValidationError(f'{dish.name} is already on this menu')
    link = MenuDish(menu=menu, dish=dish, display_order=_parse_int(display_order, 'Display order'))
    db.session.add(link)
    db.session.commit()
    return _ok({'id': link.id, 'menu_id': menu.id, 'dish_id': dish.id, 'display_order': link.display_order})


@store_operation('updating menu dish order')
def update_menu_dish_order(menu_id, dish_orders):
    """Apply [{menu_dish_id, display_order}, ...] to one menu in one transaction."""
    menu = db.session.get(Menu, menu_id)
    if not menu:
        return _not_found('Menu')
    for entry in dish_orders or []:
        link = db.session.get(MenuDish, _parse_int(entry.get('menu_dish_id'), 'Menu dish id'))
        if not link or link.menu_id != menu.id:
            raise ValidationError(f"Menu dish {entry.get('menu_dish_id')} is not on this menu")
        link.display_order = _parse_int(entry.get('display_order'), 'Display order')
    db.session.commit()
    return _ok(True)


@store_operation('removing dish from menu')
def remove_dish_from_menu(menu_id, dish_id):
    removed = MenuDish.query.filter_by(menu_id=menu_id, dish_id=dish_id).delete()
    if not removed:
        return _not_found('Menu dish')
    db.session.commit()
    return _ok(True)
