"""
API Blueprint for the Highlights backend
"""
from flask import Blueprint, jsonify, current_app

# Create main API blueprint
api_bp = Blueprint('api', __name__)


def get_feed_service():
    """FeedService bound to the document store created at app startup"""
    from highlights.services.feed_service import FeedService
    return FeedService(current_app.extensions['document_store'])


@api_bp.route('/ping', methods=['GET'])
def ping():
    """Simple ping endpoint for testing"""
    return jsonify({'message': 'pong', 'status': 'ok'}), 200


# Import route modules
from highlights.api import posts  # noqa: F401, E402
from highlights.api import projects  # noqa: F401, E402
