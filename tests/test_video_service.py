from unittest.mock import patch, call, MagicMock

import pytest
from bson import ObjectId

from app.models.mongodb import VideoRepository
from app.services.video_service import VideoService
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError

VIDEO_URL = 'https://res.cloudinary.com/demo/video/upload/v1/new-video.mp4'
THUMB_URL = 'https://res.cloudinary.com/demo/image/upload/v1/new-thumb.png'


def _with_owner(db):
    def _find(video_id):
        doc = db.videos.find_one({'_id': video_id})
        if doc:
            doc['owner'] = db.users.find_one({'_id': doc['owner']}, {'fullName': 1, 'email': 1, 'avatar': 1})
        return doc
    return _find


@pytest.fixture
def joined_videos(db):
    with patch('app.services.video_service.VideoRepository.find_with_owner', side_effect=_with_owner(db)):
        yield


@pytest.mark.usefixtures('app_ctx')
class TestPublishVideo:

    def test_missing_video_file(self, user_id):
        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(user_id), 't', 'd', None, '/tmp/thumb.png')

        assert exc.value.error_enum is APIError.MISSING_FILE
        assert exc.value.status == 400

    def test_missing_thumbnail(self, user_id):
        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(user_id), 't', 'd', '/tmp/video.mp4', None)

        assert exc.value.error_enum is APIError.MISSING_FILE

    @patch('app.services.video_service.get_video_duration', return_value=42.5)
    @patch('app.services.video_service.upload_file', side_effect=[VIDEO_URL, THUMB_URL])
    def test_publish_stores_document(self, mock_upload, mock_duration, db, user_id, joined_videos):
        video = VideoService.publish_video(str(user_id), 'My clip', 'About it', '/tmp/v.mp4', '/tmp/t.png')

        assert video.title == 'My clip'
        assert video.video_file == VIDEO_URL
        assert video.thumbnail == THUMB_URL
        assert video.duration == 42.5
        assert video.views == 0
        assert video.is_published is True
        assert video.owner.full_name == 'Alice Kim'
        mock_duration.assert_called_once_with('/tmp/v.mp4')
        assert db.videos.count_documents({'owner': user_id}) == 1

    @patch('app.services.video_service.delete_file')
    @patch('app.services.video_service.get_video_duration', return_value=1.0)
    @patch('app.services.video_service.upload_file')
    def test_thumbnail_failure_cleans_up_video_asset(self, mock_upload, mock_duration, mock_delete, db, user_id):
        mock_upload.side_effect = [VIDEO_URL, BusinessError(APIError.STORAGE_UPLOAD_FAIL)]

        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(user_id), 't', 'd', '/tmp/v.mp4', '/tmp/t.png')

        assert exc.value.error_enum is APIError.STORAGE_UPLOAD_FAIL
        mock_delete.assert_called_once_with(VIDEO_URL, resource_type='video')
        assert db.videos.count_documents({}) == 0

    @patch('app.services.video_service.delete_file', side_effect=BusinessError(APIError.STORAGE_DELETE_FAIL))
    @patch('app.services.video_service.get_video_duration', return_value=1.0)
    @patch('app.services.video_service.upload_file')
    def test_failed_cleanup_keeps_upload_error(self, mock_upload, mock_duration, mock_delete, db, user_id):
        mock_upload.side_effect = [VIDEO_URL, BusinessError(APIError.STORAGE_UPLOAD_FAIL)]

        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(user_id), 't', 'd', '/tmp/v.mp4', '/tmp/t.png')

        assert exc.value.error_enum is APIError.STORAGE_UPLOAD_FAIL
        mock_delete.assert_called_once_with(VIDEO_URL, resource_type='video')
        assert db.videos.count_documents({}) == 0

    @patch('app.services.video_service.upload_file')
    @patch('app.services.video_service.get_video_duration')
    def test_unknown_caller_is_rejected_before_upload(self, mock_duration, mock_upload, db):
        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(ObjectId()), 't', 'd', '/tmp/v.mp4', '/tmp/t.png')

        assert exc.value.error_enum is APIError.USER_NOT_FOUND
        mock_duration.assert_not_called()
        mock_upload.assert_not_called()
        assert db.videos.count_documents({}) == 0

    @patch('app.services.video_service.get_video_duration', return_value=2.0)
    @patch('app.services.video_service.upload_file', side_effect=[VIDEO_URL, THUMB_URL])
    def test_missing_joined_owner_is_not_found(self, mock_upload, mock_duration, user_id):
        with patch('app.services.video_service.VideoRepository.find_with_owner', return_value=None):
            with pytest.raises(BusinessError) as exc:
                VideoService.publish_video(str(user_id), 't', 'd', '/tmp/v.mp4', '/tmp/t.png')

        assert exc.value.error_enum is APIError.VIDEO_NOT_FOUND

    @patch('app.services.video_service.upload_file')
    @patch('app.services.video_service.get_video_duration',
           side_effect=BusinessError(APIError.MEDIA_PROBE_FAIL))
    def test_unreadable_video_is_not_uploaded(self, mock_duration, mock_upload, user_id):
        with pytest.raises(BusinessError) as exc:
            VideoService.publish_video(str(user_id), 't', 'd', '/tmp/v.mp4', '/tmp/t.png')

        assert exc.value.error_enum is APIError.MEDIA_PROBE_FAIL
        mock_upload.assert_not_called()


@pytest.mark.usefixtures('app_ctx')
class TestGetVideos:

    def test_get_video_by_id_absent(self, joined_videos):
        assert VideoService.get_video_by_id(str(ObjectId())) is None

    def test_get_video_by_id_invalid(self):
        with pytest.raises(BusinessError) as exc:
            VideoService.get_video_by_id('not-an-id')

        assert exc.value.error_enum is APIError.INVALID_ID

    def test_get_all_videos_unknown_user(self):
        with pytest.raises(BusinessError) as exc:
            VideoService.get_all_videos(str(ObjectId()))

        assert exc.value.error_enum is APIError.USER_NOT_FOUND

    def test_get_all_videos_rejects_unknown_sort_field(self, user_id):
        with pytest.raises(BusinessError) as exc:
            VideoService.get_all_videos(str(user_id), sort_by='password')

        assert exc.value.error_enum is APIError.INVALID_INPUT_VALUE

    def test_get_all_videos_builds_search_pipeline(self, user_id):
        facet = [{'docs': [], 'meta': [{'total': 0}]}]
        with patch('app.services.video_service.VideoRepository.aggregate', return_value=facet) as mock_agg:
            page = VideoService.get_all_videos(str(user_id), query='cats', page=2, limit=5,
                                               sort_by='views', sort_type='asc')

        pipeline = mock_agg.call_args[0][0]
        assert pipeline[0]['$match']['owner'] == user_id
        assert pipeline[-2] == {'$sort': {'views': 1, '_id': 1}}
        assert page.page == 2
        assert page.limit == 5
        assert page.total_docs == 0


@pytest.mark.usefixtures('app_ctx')
class TestUpdateVideo:

    def test_nothing_to_update(self, video_doc, user_id):
        video = video_doc()

        with pytest.raises(BusinessError) as exc:
            VideoService.update_video(str(video['_id']), str(user_id))

        assert exc.value.error_enum is APIError.INVALID_INPUT_VALUE

    def test_not_owner(self, video_doc, other_user_id):
        video = video_doc()

        with pytest.raises(BusinessError) as exc:
            VideoService.update_video(str(video['_id']), str(other_user_id), title='Hijacked')

        assert exc.value.error_enum is APIError.FORBIDDEN
        assert exc.value.status == 403

    def test_replaces_thumbnail_after_deleting_old_one(self, db, video_doc, user_id, joined_videos):
        video = video_doc()
        storage = MagicMock()
        storage.upload_file.return_value = THUMB_URL

        with patch('app.services.video_service.delete_file', storage.delete_file), \
                patch('app.services.video_service.upload_file', storage.upload_file):
            updated = VideoService.update_video(str(video['_id']), str(user_id),
                                                title='New title', thumbnail_path='/tmp/t.png')

        assert storage.mock_calls == [
            call.delete_file(video['thumbnail'], resource_type='image'),
            call.upload_file('/tmp/t.png', resource_type='image'),
        ]
        assert updated.title == 'New title'
        assert updated.thumbnail == THUMB_URL
        assert db.videos.find_one({'_id': video['_id']})['description'] == 'A description'


@pytest.mark.usefixtures('app_ctx')
class TestDeleteVideo:

    def test_unknown_video(self, user_id):
        with pytest.raises(BusinessError) as exc:
            VideoService.delete_video(str(ObjectId()), str(user_id))

        assert exc.value.error_enum is APIError.VIDEO_NOT_FOUND

    @patch('app.services.video_service.delete_file')
    def test_not_owner(self, mock_delete, video_doc, other_user_id, db):
        video = video_doc()

        with pytest.raises(BusinessError) as exc:
            VideoService.delete_video(str(video['_id']), str(other_user_id))

        assert exc.value.error_enum is APIError.FORBIDDEN
        mock_delete.assert_not_called()
        assert db.videos.count_documents({}) == 1

    @patch('app.services.video_service.delete_file')
    def test_storage_failure_keeps_document(self, mock_delete, video_doc, user_id, db):
        video = video_doc()
        mock_delete.side_effect = [None, BusinessError(APIError.STORAGE_DELETE_FAIL)]

        with pytest.raises(BusinessError) as exc:
            VideoService.delete_video(str(video['_id']), str(user_id))

        assert exc.value.error_enum is APIError.STORAGE_DELETE_FAIL
        assert db.videos.count_documents({'_id': video['_id']}) == 1

    @patch('app.services.video_service.delete_file')
    def test_thumbnail_is_removed_before_video_asset(self, mock_delete, video_doc, user_id, db):
        video = video_doc()
        mock_delete.side_effect = [None, BusinessError(APIError.STORAGE_DELETE_FAIL)]

        with pytest.raises(BusinessError):
            VideoService.delete_video(str(video['_id']), str(user_id))

        assert mock_delete.call_args_list == [
            call(video['thumbnail'], resource_type='image'),
            call(video['videoFile'], resource_type='video'),
        ]
        assert db.videos.find_one({'_id': video['_id']})['videoFile'] == video['videoFile']

    @patch('app.services.video_service.delete_file')
    def test_cascades_to_likes_comments_and_playlists(self, mock_delete, video_doc, user_id, other_user_id, db):
        video = video_doc()
        kept = video_doc(title='Kept')
        comment_id = db.comments.insert_one(
            {'content': 'nice', 'video': video['_id'], 'owner': other_user_id}
        ).inserted_id
        db.likes.insert_many([
            {'likedBy': other_user_id, 'video': video['_id'], 'comment': None, 'tweet': None},
            {'likedBy': user_id, 'video': None, 'comment': comment_id, 'tweet': None},
            {'likedBy': user_id, 'video': kept['_id'], 'comment': None, 'tweet': None},
        ])
        playlist_id = db.playlists.insert_one(
            {'name': 'Mix', 'description': '', 'owner': other_user_id, 'videos': [video['_id'], kept['_id']]}
        ).inserted_id

        VideoService.delete_video(str(video['_id']), str(user_id))

        assert mock_delete.call_args_list == [
            call(video['thumbnail'], resource_type='image'),
            call(video['videoFile'], resource_type='video'),
        ]
        assert db.videos.count_documents({'_id': video['_id']}) == 0
        assert db.comments.count_documents({}) == 0
        assert db.likes.count_documents({}) == 1
        assert db.playlists.find_one({'_id': playlist_id})['videos'] == [kept['_id']]


@pytest.mark.usefixtures('app_ctx')
class TestTogglePublish:

    def test_not_owner(self, video_doc, other_user_id):
        video = video_doc()

        with pytest.raises(BusinessError) as exc:
            VideoService.toggle_publish_status(str(video['_id']), str(other_user_id))

        assert exc.value.error_enum is APIError.FORBIDDEN

    def test_returns_new_state(self, video_doc, user_id):
        video = video_doc()
        with patch('app.services.video_service.VideoRepository.toggle_publish',
                   return_value={'_id': video['_id'], 'isPublished': False}) as mock_toggle:
            status = VideoService.toggle_publish_status(str(video['_id']), str(user_id))

        mock_toggle.assert_called_once_with(video['_id'])
        assert status.id == str(video['_id'])
        assert status.is_published is False

    def test_toggle_publish_uses_server_side_negation(self):
        collection = MagicMock()
        db = MagicMock()
        db.__getitem__.return_value = collection

        video_id = ObjectId()
        VideoRepository(db).toggle_publish(video_id)

        args, kwargs = collection.find_one_and_update.call_args
        assert args[0] == {'_id': video_id}
        assert args[1][0]['$set']['isPublished'] == {'$not': '$isPublished'}
        assert kwargs['projection'] == {'isPublished': 1}
