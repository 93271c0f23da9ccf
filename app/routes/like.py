from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.like import ToggleLikeResponseSchema, LikedVideoListResponseSchema
from app.services.like_service import LikeService
from common.decorator.auth_decorators import login_required

like_blueprint = Blueprint(
    'like',
    __name__,
    url_prefix='/api/v1/likes',
    description='좋아요 API'
)


def _toggle_message(result, target_label):
    return f"Liked the {target_label}" if result.is_liked else f"Like removed from {target_label}"


@like_blueprint.route('/toggle/v/<video_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_video_like(video_id):
    result = LikeService.toggle_video_like(video_id, g.user_id)

    return ApiResponse(200, result, _toggle_message(result, 'video'))


@like_blueprint.route('/toggle/c/<comment_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_comment_like(comment_id):
    result = LikeService.toggle_comment_like(comment_id, g.user_id)

    return ApiResponse(200, result, _toggle_message(result, 'comment'))


@like_blueprint.route('/toggle/t/<tweet_id>', methods=['POST'])
@login_required
@like_blueprint.response(200, ToggleLikeResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_tweet_like(tweet_id):
    result = LikeService.toggle_tweet_like(tweet_id, g.user_id)

    return ApiResponse(200, result, _toggle_message(result, 'tweet'))


@like_blueprint.route('/videos', methods=['GET'])
@login_required
@like_blueprint.response(200, LikedVideoListResponseSchema)
@like_blueprint.doc(security=[{"BearerAuth": []}])
def get_liked_videos():
    videos = LikeService.get_liked_videos(g.user_id)

    return ApiResponse(200, videos, "Liked videos fetched successfully")
