"""
Invoice Image Validation Module

Validates uploaded invoice images before they are handed to OCR.
Images are decoded through PIL so corrupted or disguised files are rejected.
"""

from io import BytesIO

from PIL import Image, ImageOps


class ImageValidationError(Exception):
    """Raised when an image fails validation."""
    pass


# Allowed image formats (PIL format names)
ALLOWED_FORMATS = {'JPEG', 'PNG'}

# Maximum image dimensions (prevent decompression bombs)
MAX_WIDTH = 8000
MAX_HEIGHT = 8000

# Maximum file size (10MB)
MAX_FILE_SIZE = 10 * 1024 * 1024


def allowed_file(filename, allowed_extensions):
    return '.' in filename and filename.rsplit('.', 1)[1].lower() in allowed_extensions


def _read_bytes(image_data):
    if isinstance(image_data, bytes):
        return image_data
    # File-like object (werkzeug FileStorage, BytesIO)
    if hasattr(image_data, 'seek'):
        image_data.seek(0)
    return image_data.read()


def load_invoice_image(image_data):
    """
    Validate invoice image data and open it for OCR.

    Args:
        image_data: Raw image bytes or file-like object

    Returns:
        PIL.Image.Image in grayscale, EXIF orientation applied

    Raises:
        ImageValidationError: If the data is not an acceptable image
    """
    content = _read_bytes(image_data)
    if not content:
        raise ImageValidationError("Empty file")
    if len(content) > MAX_FILE_SIZE:
        raise ImageValidationError(f"File size must be less than 10MB (got {len(content)} bytes)")
    if content[:5] == b'%PDF-':
        raise ImageValidationError("PDF support is coming soon. Please upload an image file for now.")

    image_buffer = BytesIO(content)
    try:
        img = Image.open(image_buffer)

        # Verify it's actually an image (detects corrupted/fake files)
        img.verify()

        # Re-open after verify (verify() leaves file in uncertain state)
        image_buffer.seek(0)
        img = Image.open(image_buffer)

        if img.format not in ALLOWED_FORMATS:
            raise ImageValidationError(
                f"Invalid image format: {img.format}. "
                f"Allowed formats: {', '.join(sorted(ALLOWED_FORMATS))}"
            )

        width, height = img.size
        if width > MAX_WIDTH or height > MAX_HEIGHT:
            raise ImageValidationError(
                f"Image dimensions too large: {width}x{height}. "
                f"Maximum: {MAX_WIDTH}x{MAX_HEIGHT}"
            )

        # Phone photos of invoices are often stored rotated
        img = ImageOps.exif_transpose(img)
        return img.convert('L')

    except ImageValidationError:
        raise
    except Image.DecompressionBombError:
        raise ImageValidationError("Image appears to be a decompression bomb (too large when decoded)")
    except Exception as e:
        raise ImageValidationError(f"Invalid or corrupted image: {str(e)}")
