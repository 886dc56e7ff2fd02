import asyncio
import logging
import sqlite3

from flask import Flask, Blueprint, current_app, jsonify, request
from flask_migrate import Migrate
from sqlalchemy import event
from sqlalchemy.engine import Engine
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db
from services import (
    calculate_ingredient_entry_cost,
    calculate_plate_cost,
    calculate_template_cost_per_unit,
    summarize_dish,
    estimate_ingredient_cost,
    line_items_to_ingredients,
)
from services import ocr, store
from utils.image_handler import load_invoice_image, allowed_file, ImageValidationError

logger = logging.getLogger(__name__)

migrate = Migrate()
api = Blueprint('api', __name__, url_prefix='/api')

# Store result codes -> HTTP status
ERROR_STATUS = {
    store.NOT_FOUND: 404,
    store.INVALID: 400,
    store.DATABASE: 500,
}


def json_result(result, status=200):
    """Render a store Result as {'data': ...} or {'error': ...}."""
    if result.error:
        return jsonify({'error': result.error}), ERROR_STATUS.get(result.code, 500)
    return jsonify({'data': result.data}), status


def json_error(message, status):
    return jsonify({'error': message}), status


def get_json_body():
    """Request JSON body as a dict, or None if it is missing or not an object."""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return None
    return body


# ============================================
# ROUTES - HOME
# ============================================

def index():
    return jsonify({
        'name': 'Menu Costing',
        'resources': [
            '/api/dishes', '/api/templates', '/api/categories', '/api/menus',
            '/api/calculate', '/api/templates/cost', '/api/estimate',
            '/api/invoices/extract', '/api/invoices/approve',
        ],
    })


# ============================================
# ROUTES - LIVE COSTING
# ============================================

@api.route('/calculate', methods=['POST'])
def calculate():
    """Cost unsaved ingredient entries, e.g. while a dish form is being edited."""
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)

    ingredients = body.get('ingredients') or []
    if not isinstance(ingredients, list) or not all(isinstance(i, dict) for i in ingredients):
        return json_error('ingredients must be a list of objects', 400)

    target_margin = body.get('target_margin')
    if target_margin is None:
        target_margin = current_app.config['DEFAULT_TARGET_MARGIN']

    summary = summarize_dish({
        'ingredients': ingredients,
        'target_margin': target_margin,
        'selling_price': body.get('selling_price'),
    })
    summary['ingredients'] = [
        {'name': ing.get('name'), 'cost': calculate_ingredient_entry_cost(ing)}
        for ing in ingredients
    ]
    return jsonify({'data': summary})


@api.route('/templates/cost', methods=['POST'])
def template_cost():
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)

    ingredients = body.get('ingredients') or []
    if not isinstance(ingredients, list) or not all(isinstance(i, dict) for i in ingredients):
        return json_error('ingredients must be a list of objects', 400)

    return jsonify({'data': {
        'total_cost': calculate_plate_cost(ingredients),
        'cost_per_unit': calculate_template_cost_per_unit(body),
    }})


@api.route('/estimate')
def estimate():
    name = request.args.get('name', '').strip()
    if not name:
        return json_error('name is required', 400)

    delay = current_app.config['ESTIMATE_DELAY_SECONDS']
    timeout = current_app.config['ESTIMATE_TIMEOUT_SECONDS']
    try:
        result = asyncio.run(asyncio.wait_for(estimate_ingredient_cost(name, delay=delay), timeout))
    except asyncio.TimeoutError:
        logger.warning("Cost estimate for %r timed out after %ss", name, timeout)
        return json_error('Cost estimate timed out', 504)
    return jsonify({'data': result})


# ============================================
# ROUTES - INVOICES
# ============================================

@api.route('/invoices/extract', methods=['POST'])
def invoice_extract():
    """OCR an uploaded invoice image and return candidate line items for review."""
    upload = request.files.get('invoice')
    if upload is None or not upload.filename:
        return json_error('No invoice file uploaded', 400)

    if not allowed_file(upload.filename, current_app.config['ALLOWED_INVOICE_EXTENSIONS']):
        if upload.filename.lower().endswith('.pdf'):
            return json_error('PDF support is coming soon. Please upload an image file for now.', 400)
        return json_error('Please upload an image file (JPG, PNG)', 400)

    try:
        image = load_invoice_image(upload.stream)
    except ImageValidationError as e:
        return json_error(str(e), 400)

    try:
        text, items = ocr.extract_line_items(image, lang=current_app.config['OCR_LANGUAGE'])
    except ocr.OCRError:
        return json_error('Failed to extract text from invoice. Please try again or enter costs manually.', 502)

    return jsonify({'data': {'text': text, 'items': items}})


@api.route('/invoices/approve', methods=['POST'])
def invoice_approve():
    """
    Turn reviewed line items into ingredient entries.

    With "save": true each entry is also stored as a single-ingredient template.
    """
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)

    items = body.get('items') or []
    edits = body.get('edits') or {}
    if not isinstance(items, list) or not all(isinstance(i, dict) for i in items):
        return json_error('items must be a list of objects', 400)
    if not all(isinstance(i.get('id'), (str, int, type(None))) for i in items):
        return json_error('item ids must be strings or numbers', 400)
    if not isinstance(edits, dict) or not all(isinstance(e, dict) for e in edits.values()):
        return json_error('edits must be an object mapping item id to an object', 400)

    ingredients = line_items_to_ingredients(items, edits)
    if not body.get('save'):
        return jsonify({'data': {'ingredients': ingredients}})

    result = store.import_invoice_ingredients(ingredients)
    if result.error:
        return json_result(result)
    data = dict(result.data, ingredients=ingredients)
    return jsonify({'data': data}), 201 if data['saved'] else 200


# ============================================
# ROUTES - DISHES
# ============================================

@api.route('/dishes', methods=['GET'])
def dishes_list():
    return json_result(store.fetch_dishes())


@api.route('/dishes', methods=['POST'])
def dish_create():
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    body.pop('id', None)
    return json_result(store.save_dish(body), status=201)


@api.route('/dishes/<int:id>', methods=['GET'])
def dish_view(id):
    return json_result(store.fetch_dish(id))


@api.route('/dishes/<int:id>', methods=['PUT'])
def dish_update(id):
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    body['id'] = id
    return json_result(store.save_dish(body))


@api.route('/dishes/<int:id>', methods=['DELETE'])
def dish_delete(id):
    return json_result(store.delete_dish(id))


# ============================================
# ROUTES - INGREDIENT TEMPLATES
# ============================================

@api.route('/templates', methods=['GET'])
def templates_list():
    return json_result(store.fetch_templates())


@api.route('/templates', methods=['POST'])
def template_create():
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    body.pop('id', None)
    return json_result(store.save_template(body), status=201)


@api.route('/templates/<int:id>', methods=['GET'])
def template_view(id):
    return json_result(store.fetch_template(id))


@api.route('/templates/<int:id>', methods=['PUT'])
def template_update(id):
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    body['id'] = id
    return json_result(store.save_template(body))


@api.route('/templates/<int:id>', methods=['DELETE'])
def template_delete(id):
    return json_result(store.delete_template(id))


# ============================================
# ROUTES - CATEGORIES
# ============================================

@api.route('/categories', methods=['GET'])
def categories_list():
    return json_result(store.fetch_categories())


@api.route('/categories', methods=['POST'])
def category_create():
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    return json_result(store.create_category(body), status=201)


@api.route('/categories/order', methods=['PUT'])
def category_order():
    body = request.get_json(silent=True)
    if not isinstance(body, list) or not all(isinstance(entry, dict) for entry in body):
        return json_error('Expected a list of {id, display_order}', 400)
    return json_result(store.update_category_order(body))


@api.route('/categories/<int:id>', methods=['PUT'])
def category_update(id):
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    return json_result(store.update_category(id, body))


@api.route('/categories/<int:id>', methods=['DELETE'])
def category_delete(id):
    return json_result(store.delete_category(id))


# ============================================
# ROUTES - MENUS
# ============================================

@api.route('/menus', methods=['GET'])
def menus_list():
    return json_result(store.fetch_menus())


@api.route('/menus', methods=['POST'])
def menu_create():
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    return json_result(store.create_menu(body), status=201)


@api.route('/menus/<int:id>', methods=['GET'])
def menu_view(id):
    return json_result(store.fetch_menu(id))


@api.route('/menus/<int:id>', methods=['PUT'])
def menu_update(id):
    body = get_json_body()
    if body is None:
        return json_error('Expected a JSON object', 400)
    return json_result(store.update_menu(id, body))


@api.route('/menus/<int:id>', methods=['DELETE'])
def menu_delete(id):
    return json_result(store.delete_menu(id))


@api.route('/menus/<int:id>/dishes', methods=['POST'])
def menu_dish_add(id):
    body = get_json_body()
    if body is None or body.get('dish_id') is None:
        return json_error('dish_id is required', 400)
    return json_result(store.add_dish_to_menu(id, body.get('dish_id'), body.get('display_order', 0)), status=201)


@api.route('/menus/<int:id>/dishes/order', methods=['PUT'])
def menu_dish_order(id):
    body = request.get_json(silent=True)
    if not isinstance(body, list) or not all(isinstance(entry, dict) for entry in body):
        return json_error('Expected a list of {menu_dish_id, display_order}', 400)
    return json_result(store.update_menu_dish_order(id, body))


@api.route('/menus/<int:id>/dishes/<int:dish_id>', methods=['DELETE'])
def menu_dish_remove(id, dish_id):
    return json_result(store.remove_dish_from_menu(id, dish_id))


# ============================================
# ERROR HANDLERS
# ============================================

def handle_http_error(error):
    return json_error(error.description, error.code)


def handle_unexpected_error(error):
    logger.exception("Unhandled error")
    return json_error('Internal server error', 500)


# ============================================
# APPLICATION SETUP
# ============================================

def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )

    db.init_app(app)
    migrate.init_app(app, db)
    ocr.configure(app.config.get('TESSERACT_CMD'))

    app.add_url_rule('/', 'index', index)
    app.register_blueprint(api)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)
    return app


# ============================================
# INITIALIZE DATABASE
# ============================================

@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    # Enable SQLite foreign key enforcement
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(app):
    with app.app_context():
        db.create_all()


app = create_app()


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=True, host='0.0.0.0', port=5000, use_reloader=False)
