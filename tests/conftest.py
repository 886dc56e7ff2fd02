"""
Shared fixtures for the menu costing tests.
"""

import os
import sys
from io import BytesIO

import pytest
from PIL import Image

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app  # noqa: E402
from config import TestingConfig  # noqa: E402
from models import db  # noqa: E402


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_image_bytes(fmt='PNG', size=(40, 20)):
    """Encode a blank image in the given PIL format."""
    buffer = BytesIO()
    Image.new('RGB', size, (255, 255, 255)).save(buffer, fmt)
    return buffer.getvalue()
