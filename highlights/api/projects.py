"""
Projects API endpoints
"""
import logging

from flask import request, jsonify

from highlights.api import api_bp, get_feed_service
from highlights.i18n import t
from highlights.models.project import DEFAULT_THUMBNAIL
from highlights.storage.errors import MalformedData

logger = logging.getLogger(__name__)


def validate_project_payload(data: dict) -> tuple[bool, str]:
    """
    Validate a project creation body

    The title must be a non-blank string; description and thumbnail are
    optional strings. Punctuation in the title is allowed and carried into
    the id.

    Returns:
        Tuple of (is_valid, error_message)
    """
    title = data.get('title')
    if not isinstance(title, str) or not title.strip():
        return False, t('errors.project_title_required')

    for field in ('description', 'thumbnail'):
        value = data.get(field)
        if value is not None and not isinstance(value, str):
            return False, t('errors.project_field_invalid', field=field)

    return True, ""


@api_bp.route('/projects', methods=['GET'])
def list_projects():
    """
    List all projects

    Returns:
        JSON response with list of projects
    """
    try:
        service = get_feed_service()
        projects = service.list_projects()

        return jsonify({
            'projects': [p.to_dict() for p in projects],
            'count': len(projects)
        }), 200

    except MalformedData:
        raise
    except Exception as e:
        logger.error(f"Error occurred while listing projects: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500


@api_bp.route('/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    """
    Get project by ID

    Args:
        project_id: Project slug

    Returns:
        JSON response with project data
    """
    try:
        service = get_feed_service()
        project = service.get_project(project_id)

        if not project:
            return jsonify({
                'error': t('errors.not_found'),
                'message': t('errors.project_not_found')
            }), 404

        return jsonify(project.to_dict()), 200

    except MalformedData:
        raise
    except Exception as e:
        logger.error(f"Error occurred while retrieving project {project_id}: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500


@api_bp.route('/projects/<project_id>/posts', methods=['GET'])
def get_project_posts(project_id):
    """
    List the posts tagged with a project

    Tags are not checked against the projects collection, so this answers
    for project ids that do not exist as well.

    Args:
        project_id: Project slug

    Returns:
        JSON response with list of posts
    """
    try:
        service = get_feed_service()
        posts = service.get_project_posts(project_id)

        return jsonify({
            'posts': [p.to_dict() for p in posts],
            'count': len(posts)
        }), 200

    except MalformedData:
        raise
    except Exception as e:
        logger.error(f"Error occurred while listing posts of project {project_id}: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500


@api_bp.route('/projects', methods=['POST'])
def create_project():
    """
    Create a new project

    Request body:
        {
            "title": "Project Title",
            "description": "Optional description",
            "thumbnail": "Optional image URL"
        }

    Returns:
        JSON response with created project data
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict):
            return jsonify({
                'error': t('errors.bad_request'),
                'message': t('errors.body_must_be_json')
            }), 400

        is_valid, error_message = validate_project_payload(data)
        if not is_valid:
            return jsonify({
                'error': t('errors.validation_error'),
                'message': error_message
            }), 400

        service = get_feed_service()
        project, projects = service.create_project(
            data['title'],
            description=data.get('description') or '',
            thumbnail=data.get('thumbnail') or DEFAULT_THUMBNAIL,
        )

        return jsonify({
            'message': t('success.project_created'),
            'project': project.to_dict(),
            'count': len(projects),
            'storage': service.last_outcome.to_dict(),
        }), 201

    except ValueError as e:
        return jsonify({
            'error': t('errors.validation_error'),
            'message': str(e)
        }), 400
    except MalformedData:
        raise
    except Exception as e:
        logger.error(f"Error occurred while creating project: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500
