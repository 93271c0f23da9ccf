from typing import List, Optional

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.logging_utils import get_logger
from common.utils.object_id_utils import to_object_id
from app.models.mongodb import PlaylistRepository, VideoRepository, UserRepository
from app.dto.playlist import PlaylistDto, PlaylistDetailDto

logger = get_logger('playlist_service')


class PlaylistService:

    @staticmethod
    def _get_own_playlist(playlist_repo: PlaylistRepository, playlist_id, user_id):
        playlist = playlist_repo.find_by_id(playlist_id)
        if not playlist:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)
        if playlist['owner'] != to_object_id(user_id, 'userId'):
            raise BusinessError(APIError.FORBIDDEN)
        return playlist

    @staticmethod
    def _read_summary(playlist_repo: PlaylistRepository, playlist_id) -> PlaylistDto:
        doc = playlist_repo.find_summary(playlist_id)
        if doc is None:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)
        return PlaylistDto.from_document(doc)

    @staticmethod
    def _read_detail(playlist_repo: PlaylistRepository, playlist_id) -> PlaylistDetailDto:
        doc = playlist_repo.find_detail(playlist_id)
        if doc is None:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)
        return PlaylistDetailDto.from_document(doc)

    @staticmethod
    @mongo_operation
    def create_playlist(user_id: str, name: str, description: str = '') -> PlaylistDto:
        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()

        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        playlist_repo = PlaylistRepository(db)
        playlist_id = playlist_repo.insert_playlist(name, description or '', owner_id)
        logger.info(f"Playlist {playlist_id} created by {user_id}")

        return PlaylistService._read_summary(playlist_repo, playlist_id)

    @staticmethod
    @mongo_operation
    def get_user_playlists(user_id: str) -> List[PlaylistDto]:
        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()

        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        return [PlaylistDto.from_document(doc) for doc in PlaylistRepository(db).find_by_owner(owner_id)]

    @staticmethod
    @mongo_operation
    def get_playlist_by_id(playlist_id: str) -> PlaylistDetailDto:
        return PlaylistService._read_detail(
            PlaylistRepository(get_mongo_db()), to_object_id(playlist_id, 'playlistId')
        )

    @staticmethod
    @mongo_operation
    def add_video_to_playlist(playlist_id: str, video_id: str, user_id: str) -> PlaylistDetailDto:
        playlist_oid = to_object_id(playlist_id, 'playlistId')
        video_oid = to_object_id(video_id, 'videoId')
        db = get_mongo_db()
        playlist_repo = PlaylistRepository(db)

        PlaylistService._get_own_playlist(playlist_repo, playlist_oid, user_id)
        if not VideoRepository(db).exists(video_oid):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        updated = playlist_repo.add_video(playlist_oid, video_oid)
        if updated is None:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)
        if video_oid not in updated.get('videos', []):
            raise BusinessError(APIError.PLAYLIST_UPDATE_FAIL, "Error while adding video to playlist")

        return PlaylistService._read_detail(playlist_repo, playlist_oid)

    @staticmethod
    @mongo_operation
    def remove_video_from_playlist(playlist_id: str, video_id: str, user_id: str) -> PlaylistDetailDto:
        playlist_oid = to_object_id(playlist_id, 'playlistId')
        video_oid = to_object_id(video_id, 'videoId')
        playlist_repo = PlaylistRepository(get_mongo_db())

        PlaylistService._get_own_playlist(playlist_repo, playlist_oid, user_id)

        updated = playlist_repo.remove_video(playlist_oid, video_oid)
        if updated is None:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)
        if video_oid in updated.get('videos', []):
            raise BusinessError(APIError.PLAYLIST_UPDATE_FAIL, "Error while removing video from playlist")

        return PlaylistService._read_detail(playlist_repo, playlist_oid)

    @staticmethod
    @mongo_operation
    def update_playlist(playlist_id: str, user_id: str, name: Optional[str] = None,
                        description: Optional[str] = None) -> PlaylistDto:
        if not (name or description):
            raise BusinessError(APIError.INVALID_INPUT_VALUE, "Name and description cannot both be empty")

        playlist_oid = to_object_id(playlist_id, 'playlistId')
        playlist_repo = PlaylistRepository(get_mongo_db())

        PlaylistService._get_own_playlist(playlist_repo, playlist_oid, user_id)

        fields = {}
        if name:
            fields['name'] = name
        if description:
            fields['description'] = description

        if playlist_repo.update_fields(playlist_oid, fields) is None:
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)

        return PlaylistService._read_summary(playlist_repo, playlist_oid)

    @staticmethod
    @mongo_operation
    def delete_playlist(playlist_id: str, user_id: str):
        playlist_oid = to_object_id(playlist_id, 'playlistId')
        playlist_repo = PlaylistRepository(get_mongo_db())

        PlaylistService._get_own_playlist(playlist_repo, playlist_oid, user_id)

        if not playlist_repo.delete_by_id(playlist_oid):
            raise BusinessError(APIError.PLAYLIST_NOT_FOUND)

        logger.info(f"Playlist {playlist_id} deleted by {user_id}")
