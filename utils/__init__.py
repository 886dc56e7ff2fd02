# Utility modules for the menu costing app
from .image_handler import load_invoice_image, allowed_file, ImageValidationError
from .sanitizer import sanitize_text, sanitize_name, sanitize_color
