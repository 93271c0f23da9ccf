from typing import Optional

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.logging_utils import get_logger
from common.utils.media_utils import get_video_duration
from common.utils.object_id_utils import to_object_id
from common.utils.storage_utils import upload_file, delete_file
from common.utils.pipeline import read_page
from app.models.mongodb import (
    Video, VideoRepository, UserRepository, LikeRepository, CommentRepository, PlaylistRepository
)
from app.dto.video import VideoDto, PublishStatusDto

logger = get_logger('video_service')

SORTABLE_FIELDS = ('createdAt', 'views', 'duration', 'title')


class VideoService:

    @staticmethod
    def _require_owner(video: dict, user_id):
        if video['owner'] != to_object_id(user_id, 'userId'):
            raise BusinessError(APIError.FORBIDDEN)

    @staticmethod
    def _read_joined(video_repo: VideoRepository, video_oid) -> VideoDto:
        #NOTE: 소유자 문서가 없으면 $unwind 에서 행이 빠진다
        doc = video_repo.find_with_owner(video_oid)
        if doc is None:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        return VideoDto.from_document(doc)

    @staticmethod
    @mongo_operation
    def get_all_videos(user_id: str, query: Optional[str] = None, page: int = 1, limit: int = 10,
                       sort_by: str = 'createdAt', sort_type: str = 'desc'):
        owner_id = to_object_id(user_id, 'userId')

        db = get_mongo_db()
        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        if sort_by not in SORTABLE_FIELDS:
            raise BusinessError(APIError.INVALID_INPUT_VALUE, f"sortBy must be one of {', '.join(SORTABLE_FIELDS)}")
        direction = 1 if sort_type == 'asc' else -1

        video_repo = VideoRepository(db)
        result = video_repo.aggregate(
            VideoRepository.search_pipeline(owner_id, query, sort_by, direction, page, limit)
        )
        return read_page(result, page, limit, convert=VideoDto.from_document)

    @staticmethod
    @mongo_operation
    def publish_video(user_id: str, title: str, description: str,
                      video_file_path: Optional[str], thumbnail_path: Optional[str]) -> VideoDto:
        if not video_file_path:
            raise BusinessError(APIError.MISSING_FILE, "Video file missing")
        if not thumbnail_path:
            raise BusinessError(APIError.MISSING_FILE, "Thumbnail missing")

        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()
        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        duration = get_video_duration(video_file_path)

        video_url = upload_file(video_file_path, resource_type='video')
        try:
            thumbnail_url = upload_file(thumbnail_path, resource_type='image')
        except BusinessError:
            #NOTE: 썸네일 업로드 실패 시 먼저 올린 영상 자산 정리. 정리 실패는 로그만 남긴다
            try:
                delete_file(video_url, resource_type='video')
            except BusinessError as cleanup_error:
                logger.error(f"Could not remove orphaned video asset {video_url}: {cleanup_error.message}")
            raise

        video_repo = VideoRepository(db)
        video_id = video_repo.insert_video(Video(
            video_file=video_url,
            thumbnail=thumbnail_url,
            title=title,
            description=description,
            duration=duration,
            owner=owner_id
        ))
        logger.info(f"Video {video_id} published by {user_id}")

        return VideoService._read_joined(video_repo, video_id)

    @staticmethod
    @mongo_operation
    def get_video_by_id(video_id: str) -> Optional[VideoDto]:
        doc = VideoRepository(get_mongo_db()).find_with_owner(to_object_id(video_id, 'videoId'))
        return VideoDto.from_document(doc) if doc else None

    @staticmethod
    @mongo_operation
    def update_video(video_id: str, user_id: str, title: Optional[str] = None,
                     description: Optional[str] = None, thumbnail_path: Optional[str] = None) -> VideoDto:
        if not (title or description or thumbnail_path):
            raise BusinessError(APIError.INVALID_INPUT_VALUE, "Nothing to update")

        video_oid = to_object_id(video_id, 'videoId')
        video_repo = VideoRepository(get_mongo_db())

        video = video_repo.find_by_id(video_oid)
        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        VideoService._require_owner(video, user_id)

        fields = {}
        if title:
            fields['title'] = title
        if description:
            fields['description'] = description
        if thumbnail_path:
            delete_file(video['thumbnail'], resource_type='image')
            fields['thumbnail'] = upload_file(thumbnail_path, resource_type='image')

        if video_repo.update_fields(video_oid, fields) is None:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        return VideoService._read_joined(video_repo, video_oid)

    @staticmethod
    @mongo_operation
    def delete_video(video_id: str, user_id: str):
        video_oid = to_object_id(video_id, 'videoId')
        db = get_mongo_db()
        video_repo = VideoRepository(db)

        video = video_repo.find_by_id(video_oid)
        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        VideoService._require_owner(video, user_id)

        # 자산 삭제가 하나라도 실패하면 문서는 건드리지 않는다
        # 썸네일 -> 영상 순서. 중간 실패 시 남는 문서는 재생 가능해야 한다
        delete_file(video['thumbnail'], resource_type='image')
        delete_file(video['videoFile'], resource_type='video')

        if not video_repo.delete_by_id(video_oid):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        comment_repo = CommentRepository(db)
        like_repo = LikeRepository(db)
        like_repo.delete_for_target('video', [video_oid])
        like_repo.delete_for_target('comment', comment_repo.ids_by_video(video_oid))
        comment_repo.delete_by_video(video_oid)
        PlaylistRepository(db).pull_video_everywhere(video_oid)

        logger.info(f"Video {video_id} deleted by {user_id}")

    @staticmethod
    @mongo_operation
    def toggle_publish_status(video_id: str, user_id: str) -> PublishStatusDto:
        video_oid = to_object_id(video_id, 'videoId')
        video_repo = VideoRepository(get_mongo_db())

        video = video_repo.find_by_id(video_oid)
        if not video:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        VideoService._require_owner(video, user_id)

        updated = video_repo.toggle_publish(video_oid)
        if updated is None:
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        return PublishStatusDto(id=video_id, is_published=bool(updated['isPublished']))
