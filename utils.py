"""
Utility functions for the LegalEase document assistant.
"""
import base64
import binascii
import logging

from config import ALLOWED_IMAGE_TYPES
from exceptions import InvalidInput

logger = logging.getLogger(__name__)


def validate_image_file(file):
    """
    Validate an uploaded image file.

    Args:
        file: Uploaded file object

    Returns:
        tuple: (is_valid, error_message)
    """
    if not file:
        return False, "No file provided"

    if file.filename == '':
        return False, "No file selected"

    if file.mimetype not in ALLOWED_IMAGE_TYPES:
        return False, f"Unsupported image type '{file.mimetype}'. Allowed types: {', '.join(ALLOWED_IMAGE_TYPES)}"

    return True, ""


def decode_image_payload(image, mime_type=None):
    """
    Decode base64 image data, optionally given as a data URL.

    Args:
        image: Base64 string or ``data:<mime>;base64,<data>`` URL
        mime_type: MIME type, required when ``image`` is not a data URL

    Returns:
        tuple: (image_bytes, mime_type)
    """
    if image.startswith("data:"):
        header, _, image = image.partition(",")
        declared = header[len("data:"):].split(";")[0]
        mime_type = mime_type or declared

    if not mime_type:
        raise InvalidInput("Image data and MIME type are required.")
    if mime_type not in ALLOWED_IMAGE_TYPES:
        raise InvalidInput(f"Unsupported image type '{mime_type}'. Allowed types: {', '.join(ALLOWED_IMAGE_TYPES)}")

    try:
        image_bytes = base64.b64decode(image, validate=True)
    except binascii.Error as e:
        raise InvalidInput(f"Image data is not valid base64: {str(e)}") from e
    return image_bytes, mime_type


def log_error_and_return(error_msg, status_code=500):
    """
    Log an error and return a formatted error response.

    Args:
        error_msg: Error message to log and return
        status_code: HTTP status code

    Returns:
        tuple: (error_dict, status_code)
    """
    logger.error(error_msg)
    return {"error": error_msg}, status_code
