from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.common_schema import ApiResponseSchema, PaginationRequestSchema
from app.schemas.comment import (
    CommentContentRequestSchema, CommentResponseSchema, CommentPageResponseSchema
)
from app.services.comment_service import CommentService
from common.decorator.auth_decorators import login_required

comment_blueprint = Blueprint(
    'comment',
    __name__,
    url_prefix='/api/v1/comments',
    description='댓글 API'
)


@comment_blueprint.route('/<video_id>', methods=['GET'])
@login_required
@comment_blueprint.arguments(PaginationRequestSchema, location='query')
@comment_blueprint.response(200, CommentPageResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def get_video_comments(args, video_id):
    page = CommentService.get_video_comments(video_id, args.get('page', 1), args.get('limit', 10))

    return ApiResponse(200, page, "Comments fetched successfully")


@comment_blueprint.route('/<video_id>', methods=['POST'])
@login_required
@comment_blueprint.arguments(CommentContentRequestSchema)
@comment_blueprint.response(200, CommentResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def add_comment(data, video_id):
    comment = CommentService.add_comment(video_id, g.user_id, data['content'])

    return ApiResponse(200, comment, "Comment has been created")


@comment_blueprint.route('/c/<comment_id>', methods=['PATCH'])
@login_required
@comment_blueprint.arguments(CommentContentRequestSchema)
@comment_blueprint.response(200, CommentResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def update_comment(data, comment_id):
    comment = CommentService.update_comment(comment_id, g.user_id, data['content'])

    return ApiResponse(200, comment, "Comment has been updated")


@comment_blueprint.route('/c/<comment_id>', methods=['DELETE'])
@login_required
@comment_blueprint.response(200, ApiResponseSchema)
@comment_blueprint.doc(security=[{"BearerAuth": []}])
def delete_comment(comment_id):
    CommentService.delete_comment(comment_id, g.user_id)

    return ApiResponse(200, {}, "Comment deleted successfully")
