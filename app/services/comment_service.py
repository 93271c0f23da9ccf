from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.logging_utils import get_logger
from common.utils.object_id_utils import to_object_id
from common.utils.pipeline import read_page
from app.models.mongodb import CommentRepository, VideoRepository, LikeRepository, UserRepository
from app.dto.comment import CommentDto

logger = get_logger('comment_service')


class CommentService:

    @staticmethod
    def _get_own_comment(comment_repo: CommentRepository, comment_id, user_id):
        comment = comment_repo.find_by_id(comment_id)
        if not comment:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)
        if comment['owner'] != to_object_id(user_id, 'userId'):
            raise BusinessError(APIError.FORBIDDEN)
        return comment

    @staticmethod
    def _read_joined(comment_repo: CommentRepository, comment_id) -> CommentDto:
        doc = comment_repo.find_joined(comment_id)
        if doc is None:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)
        return CommentDto.from_document(doc)

    @staticmethod
    @mongo_operation
    def get_video_comments(video_id: str, page: int = 1, limit: int = 10):
        video_oid = to_object_id(video_id, 'videoId')
        db = get_mongo_db()

        if not VideoRepository(db).exists(video_oid):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        result = CommentRepository(db).aggregate(
            CommentRepository.video_page_pipeline(video_oid, page, limit)
        )
        return read_page(result, page, limit, convert=CommentDto.from_document)

    @staticmethod
    @mongo_operation
    def add_comment(video_id: str, user_id: str, content: str) -> CommentDto:
        video_oid = to_object_id(video_id, 'videoId')
        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()

        if not VideoRepository(db).exists(video_oid):
            raise BusinessError(APIError.VIDEO_NOT_FOUND)
        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        comment_repo = CommentRepository(db)
        comment_id = comment_repo.insert_comment(content, video_oid, owner_id)
        logger.info(f"Comment {comment_id} created on video {video_id}")

        return CommentService._read_joined(comment_repo, comment_id)

    @staticmethod
    @mongo_operation
    def update_comment(comment_id: str, user_id: str, content: str) -> CommentDto:
        comment_oid = to_object_id(comment_id, 'commentId')
        comment_repo = CommentRepository(get_mongo_db())

        CommentService._get_own_comment(comment_repo, comment_oid, user_id)

        if comment_repo.update_fields(comment_oid, {'content': content}) is None:
            raise BusinessError(APIError.COMMENT_NOT_FOUND)

        return CommentService._read_joined(comment_repo, comment_oid)

    @staticmethod
    @mongo_operation
    def delete_comment(comment_id: str, user_id: str):
        comment_oid = to_object_id(comment_id, 'commentId')
        db = get_mongo_db()
        comment_repo = CommentRepository(db)

        CommentService._get_own_comment(comment_repo, comment_oid, user_id)

        if not comment_repo.delete_by_id(comment_oid):
            raise BusinessError(APIError.COMMENT_NOT_FOUND)
        LikeRepository(db).delete_for_target('comment', [comment_oid])

        logger.info(f"Comment {comment_id} deleted by {user_id}")
