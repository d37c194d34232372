import logging
from datetime import datetime

from flask import Flask, request, jsonify, current_app
from flask_cors import CORS
from pydantic import ValidationError
from werkzeug.exceptions import RequestEntityTooLarge

# Import configuration and processing functions
from config import API_HOST, API_PORT, API_DEBUG, API_VERSION, MAX_FILE_SIZE, DEFAULT_LANGUAGE
from constants import SUPPORTED_LANGUAGES
from ai_client import LegalAIClient
from ai_processor import extract_text_from_image, analyze_document
from exceptions import LegalEaseError
from schemas import AnalysisKind, AnalyzeRequest, ImagePayload
from utils import validate_image_file, decode_image_payload, log_error_and_return

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(ai_client=None):
    """
    Build the Flask application.

    The AI client is created once here and shared by every request.
    """
    app = Flask(__name__)
    CORS(app)  # Cross-Origin Resource Sharing configuration for frontend compatibility

    app.config['MAX_CONTENT_LENGTH'] = MAX_FILE_SIZE
    if ai_client is None:
        ai_client = LegalAIClient.from_config()
    app.extensions['legal_ai_client'] = ai_client

    app.register_error_handler(RequestEntityTooLarge, _file_too_large)

    app.add_url_rule('/ping', view_func=ping, methods=['GET'])
    app.add_url_rule('/options', view_func=get_options, methods=['GET'])
    app.add_url_rule('/extract', view_func=extract_document_text, methods=['POST'])
    app.add_url_rule('/analyze', view_func=analyze, methods=['POST'])

    logger.info("Flask application initialized")
    return app


def _ai_client():
    return current_app.extensions['legal_ai_client']


def _file_too_large(error):
    body, status = log_error_and_return(
        f"Image is too large. Maximum size is {MAX_FILE_SIZE // (1024 * 1024)}MB", 413
    )
    return jsonify(body), status


# --- API ENDPOINTS ---

def ping():
    """
    Health check endpoint to verify the server is running.
    Returns server status and timestamp.
    """
    return jsonify({
        "status": "ok",
        "message": "LegalEase AI API is running",
        "timestamp": datetime.now().isoformat(),
        "version": API_VERSION
    }), 200


def get_options():
    """Lists the target languages and analysis kinds the UI can offer."""
    return jsonify({
        "languages": SUPPORTED_LANGUAGES,
        "default_language": DEFAULT_LANGUAGE,
        "analysis_kinds": [{"value": kind.value, "label": kind.label} for kind in AnalysisKind]
    }), 200


def extract_document_text():
    """
    Extracts text from an uploaded or camera-captured document image.
    Accepts a multipart 'file' upload or a JSON body with base64 'image' data.
    """
    try:
        if 'file' in request.files:
            file = request.files['file']
            is_valid, error_message = validate_image_file(file)
            if not is_valid:
                return jsonify({"error": error_message}), 400
            image_bytes, mime_type = file.read(), file.mimetype
        else:
            data = request.get_json(silent=True)
            if not data:
                return jsonify({"error": "No image provided. Send a 'file' upload or a JSON 'image' field"}), 400
            payload = ImagePayload.model_validate(data)
            image_bytes, mime_type = decode_image_payload(payload.image, payload.mime_type)

        logger.info(f"Extracting text from image ({mime_type})")
        text = extract_text_from_image(_ai_client(), image_bytes, mime_type)

        logger.info("Text extracted successfully")
        return jsonify({"text": text}), 200

    except RequestEntityTooLarge:
        raise
    except ValidationError as e:
        return jsonify({"error": f"Invalid request body: {e.errors()[0]['msg']}"}), 400
    except LegalEaseError as e:
        body, status = log_error_and_return(e.message, e.status_code)
        return jsonify(body), status
    except Exception as e:
        logger.error(f"Text extraction failed: {str(e)}")
        return jsonify({"error": f"An error occurred during text extraction: {str(e)}"}), 500


def analyze():
    """
    Runs one analysis over previously extracted document text.
    """
    try:
        data = request.get_json(silent=True)
        if not data:
            return jsonify({"error": "Missing JSON request body"}), 400

        analyze_request = AnalyzeRequest.model_validate(data)

        logger.info(f"Processing {analyze_request.kind.value} analysis in {analyze_request.target_language}")
        result = analyze_document(
            _ai_client(),
            analyze_request.kind,
            analyze_request.document_text,
            query=analyze_request.query,
            target_language=analyze_request.target_language,
        )

        response = {
            "kind": result.kind.value,
            "html": result.html,
            "target_language": result.target_language,
        }
        if result.risk is not None:
            response["risk"] = {
                "score": result.risk.score,
                "rating": result.risk.rating,
                "justification": result.risk.justification,
                "tier": result.risk.tier.value,
            }

        logger.info("Analysis completed successfully")
        return jsonify(response), 200

    except RequestEntityTooLarge:
        raise
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error.get("loc", ()))
        return jsonify({"error": f"Invalid request body: {field}: {error['msg']}"}), 400
    except LegalEaseError as e:
        body, status = log_error_and_return(e.message, e.status_code)
        return jsonify(body), status
    except Exception as e:
        logger.error(f"Document analysis failed: {str(e)}")
        return jsonify({"error": f"An error occurred during analysis: {str(e)}"}), 500


# --- RUN THE APP ---
if __name__ == '__main__':
    # Application server configuration
    app = create_app()
    logger.info(f"Starting LegalEase AI API on {API_HOST}:{API_PORT}")
    app.run(host=API_HOST, port=API_PORT, debug=API_DEBUG)
