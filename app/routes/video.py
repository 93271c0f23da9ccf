from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.common_schema import ApiResponseSchema
from app.schemas.video import (
    GetAllVideosRequestSchema, VideoPageResponseSchema,
    PublishVideoFormSchema, PublishVideoFilesSchema,
    UpdateVideoFormSchema, UpdateVideoFilesSchema,
    VideoResponseSchema, PublishStatusResponseSchema
)
from app.services.video_service import VideoService
from common.decorator.auth_decorators import login_required
from common.utils.upload_utils import save_upload, discard_upload

video_blueprint = Blueprint(
    'video',
    __name__,
    url_prefix='/api/v1/videos',
    description='영상 API'
)


@video_blueprint.route('', methods=['GET'])
@login_required
@video_blueprint.arguments(GetAllVideosRequestSchema, location='query')
@video_blueprint.response(200, VideoPageResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def get_all_videos(args):
    page = VideoService.get_all_videos(
        args['user_id'],
        query=args.get('query'),
        page=args.get('page', 1),
        limit=args.get('limit', 10),
        sort_by=args.get('sort_by', 'createdAt'),
        sort_type=args.get('sort_type', 'desc')
    )
    return ApiResponse(200, page, "Videos fetched successfully")


@video_blueprint.route('', methods=['POST'])
@login_required
@video_blueprint.arguments(PublishVideoFormSchema, location='form')
@video_blueprint.arguments(PublishVideoFilesSchema, location='files')
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def publish_video(form, files):
    video_file_path = save_upload(files.get('video_file'))
    thumbnail_path = save_upload(files.get('thumbnail'))

    try:
        video = VideoService.publish_video(
            g.user_id,
            form['title'],
            form['description'],
            video_file_path,
            thumbnail_path
        )
    finally:
        discard_upload(video_file_path, thumbnail_path)

    return ApiResponse(200, video, "Video has been uploaded and published")


@video_blueprint.route('/<video_id>', methods=['GET'])
@login_required
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.alt_response(404, schema=VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def get_video_by_id(video_id):
    video = VideoService.get_video_by_id(video_id)

    if video is None:
        return ApiResponse(404, None, "Video not found"), 404

    return ApiResponse(200, video, "Video fetched successfully")


@video_blueprint.route('/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.arguments(UpdateVideoFormSchema, location='form')
@video_blueprint.arguments(UpdateVideoFilesSchema, location='files')
@video_blueprint.response(200, VideoResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def update_video(form, files, video_id):
    thumbnail_path = save_upload(files.get('thumbnail'))

    try:
        video = VideoService.update_video(
            video_id,
            g.user_id,
            title=form.get('title'),
            description=form.get('description'),
            thumbnail_path=thumbnail_path
        )
    finally:
        discard_upload(thumbnail_path)

    return ApiResponse(200, video, "Video details updated successfully")


@video_blueprint.route('/<video_id>', methods=['DELETE'])
@login_required
@video_blueprint.response(200, ApiResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def delete_video(video_id):
    VideoService.delete_video(video_id, g.user_id)

    return ApiResponse(200, {}, "Video deleted successfully")


@video_blueprint.route('/toggle/publish/<video_id>', methods=['PATCH'])
@login_required
@video_blueprint.response(200, PublishStatusResponseSchema)
@video_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_publish_status(video_id):
    status = VideoService.toggle_publish_status(video_id, g.user_id)
    message = f"Video {'is' if status.is_published else 'not'} published"

    return ApiResponse(200, status, message)
