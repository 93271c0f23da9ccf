from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.common_schema import ApiResponseSchema
from app.schemas.playlist import (
    CreatePlaylistRequestSchema, UpdatePlaylistRequestSchema,
    PlaylistResponseSchema, PlaylistListResponseSchema, PlaylistDetailResponseSchema
)
from app.services.playlist_service import PlaylistService
from common.decorator.auth_decorators import login_required

playlist_blueprint = Blueprint(
    'playlist',
    __name__,
    url_prefix='/api/v1/playlists',
    description='플레이리스트 API'
)


@playlist_blueprint.route('', methods=['POST'])
@login_required
@playlist_blueprint.arguments(CreatePlaylistRequestSchema)
@playlist_blueprint.response(200, PlaylistResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def create_playlist(data):
    playlist = PlaylistService.create_playlist(g.user_id, data['name'], data.get('description', ''))

    return ApiResponse(200, playlist, "Playlist successfully created")


@playlist_blueprint.route('/user/<user_id>', methods=['GET'])
@login_required
@playlist_blueprint.response(200, PlaylistListResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def get_user_playlists(user_id):
    playlists = PlaylistService.get_user_playlists(user_id)

    return ApiResponse(200, playlists, "User playlists fetched successfully")


@playlist_blueprint.route('/<playlist_id>', methods=['GET'])
@login_required
@playlist_blueprint.response(200, PlaylistDetailResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def get_playlist_by_id(playlist_id):
    playlist = PlaylistService.get_playlist_by_id(playlist_id)

    return ApiResponse(200, playlist, "Playlist fetched successfully")


@playlist_blueprint.route('/<playlist_id>', methods=['PATCH'])
@login_required
@playlist_blueprint.arguments(UpdatePlaylistRequestSchema)
@playlist_blueprint.response(200, PlaylistResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def update_playlist(data, playlist_id):
    playlist = PlaylistService.update_playlist(
        playlist_id,
        g.user_id,
        name=data.get('name'),
        description=data.get('description')
    )

    return ApiResponse(200, playlist, "Playlist updated successfully")


@playlist_blueprint.route('/<playlist_id>', methods=['DELETE'])
@login_required
@playlist_blueprint.response(200, ApiResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def delete_playlist(playlist_id):
    PlaylistService.delete_playlist(playlist_id, g.user_id)

    return ApiResponse(200, {}, "Playlist deleted successfully")


@playlist_blueprint.route('/add/<video_id>/<playlist_id>', methods=['PATCH'])
@login_required
@playlist_blueprint.response(200, PlaylistDetailResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def add_video_to_playlist(video_id, playlist_id):
    playlist = PlaylistService.add_video_to_playlist(playlist_id, video_id, g.user_id)

    return ApiResponse(200, playlist, "Video added successfully")


@playlist_blueprint.route('/remove/<video_id>/<playlist_id>', methods=['PATCH'])
@login_required
@playlist_blueprint.response(200, PlaylistDetailResponseSchema)
@playlist_blueprint.doc(security=[{"BearerAuth": []}])
def remove_video_from_playlist(video_id, playlist_id):
    playlist = PlaylistService.remove_video_from_playlist(playlist_id, video_id, g.user_id)

    return ApiResponse(200, playlist, "Video removed successfully")
