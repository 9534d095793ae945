"""
Posts API endpoints
"""
import logging

from flask import request, jsonify

from highlights.api import api_bp, get_feed_service
from highlights.i18n import t
from highlights.models.post import DEFAULT_AUTHOR
from highlights.storage.errors import MalformedData

logger = logging.getLogger(__name__)


@api_bp.route('/posts', methods=['GET'])
def list_posts():
    """
    List the feed

    Query parameters:
        project: Only posts tagged with this project id
        q: Only posts containing this text (case-insensitive)

    Returns:
        JSON response with matching posts and the project tags of the whole feed
    """
    try:
        service = get_feed_service()
        posts = service.all_posts()
        matching = service.list_posts(
            project_tag=request.args.get('project') or None,
            search_term=request.args.get('q') or None,
            posts=posts,
        )

        return jsonify({
            'posts': [p.to_dict() for p in matching],
            'count': len(matching),
            'projectTags': service.project_tags(posts),
        }), 200

    except MalformedData:
        raise
    except Exception as e:
        logger.error(f"Error occurred while listing posts: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500


@api_bp.route('/posts', methods=['POST'])
def create_post():
    """
    Create a new post

    Request body:
        {
            "content": "Shipped the **first** build",
            "author": "Optional display name",
            "projectTag": "optional-project-id"
        }

    Returns:
        JSON response with the created post and where it was stored
    """
    try:
        data = request.get_json(silent=True)

        if not isinstance(data, dict):
            return jsonify({
                'error': t('errors.bad_request'),
                'message': t('errors.body_must_be_json')
            }), 400

        content = data.get('content')
        if not isinstance(content, str) or not content.strip():
            return jsonify({
                'error': t('errors.validation_error'),
                'message': t('errors.post_content_required')
            }), 400

        author = data.get('author') or DEFAULT_AUTHOR
        if not isinstance(author, str):
            return jsonify({
                'error': t('errors.validation_error'),
                'message': t('errors.post_author_invalid')
            }), 400

        project_tag = data.get('projectTag')
        if project_tag is not None and not isinstance(project_tag, str):
            return jsonify({
                'error': t('errors.validation_error'),
                'message': t('errors.project_tag_invalid')
            }), 400

        service = get_feed_service()
        post, posts = service.create_post(content, author=author, project_tag=project_tag)

        return jsonify({
            'message': t('success.post_created'),
            'post': post.to_dict(),
            'count': len(posts),
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
        logger.error(f"Error occurred while creating post: {e}")
        return jsonify({
            'error': t('errors.internal_error'),
            'message': str(e)
        }), 500
