from io import BytesIO
from unittest.mock import patch, MagicMock

import cv2
import pytest
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import PyMongoError
from werkzeug.datastructures import FileStorage

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.utils.media_utils import get_video_duration
from common.utils.object_id_utils import to_object_id
from common.utils.upload_utils import save_upload, discard_upload


class TestToObjectId:

    def test_valid(self):
        oid = ObjectId()

        assert to_object_id(str(oid)) == oid
        assert to_object_id(oid) is oid

    def test_missing(self):
        with pytest.raises(BusinessError) as exc:
            to_object_id('', 'videoId')

        assert exc.value.error_enum is APIError.INVALID_INPUT_VALUE

    def test_malformed(self):
        with pytest.raises(BusinessError) as exc:
            to_object_id('xyz', 'videoId')

        assert exc.value.error_enum is APIError.INVALID_ID
        assert 'videoId' in exc.value.message


class TestMongoOperation:

    def test_business_error_passes_through(self):
        @mongo_operation
        def op():
            raise BusinessError(APIError.VIDEO_NOT_FOUND)

        with pytest.raises(BusinessError) as exc:
            op()

        assert exc.value.error_enum is APIError.VIDEO_NOT_FOUND

    def test_invalid_id(self):
        @mongo_operation
        def op():
            raise InvalidId('bad')

        with pytest.raises(BusinessError) as exc:
            op()

        assert exc.value.error_enum is APIError.INVALID_ID

    def test_datastore_error(self):
        @mongo_operation
        def op():
            raise PyMongoError('connection reset')

        with pytest.raises(BusinessError) as exc:
            op()

        assert exc.value.error_enum is APIError.DB_ERROR
        assert exc.value.status == 500


class TestBusinessError:

    def test_to_dict(self):
        error = BusinessError(APIError.PLAYLIST_NOT_FOUND)

        assert error.to_dict() == {
            'statusCode': 404,
            'message': 'Playlist does not exist.',
            'success': False,
            'code': 'P001'
        }

    def test_custom_message(self):
        assert BusinessError(APIError.MISSING_FILE, 'Thumbnail missing').message == 'Thumbnail missing'


class TestVideoDuration:

    def _capture(self, opened=True, fps=25.0, frames=250.0):
        capture = MagicMock()
        capture.isOpened.return_value = opened
        capture.get.side_effect = lambda prop: fps if prop == cv2.CAP_PROP_FPS else frames
        return capture

    def test_duration_from_frames(self):
        capture = self._capture(fps=30.0, frames=100.0)
        with patch('cv2.VideoCapture', return_value=capture):
            assert get_video_duration('/tmp/v.mp4') == 3.33

        capture.release.assert_called_once()

    def test_unreadable_file(self):
        capture = self._capture(opened=False)
        with patch('cv2.VideoCapture', return_value=capture):
            with pytest.raises(BusinessError) as exc:
                get_video_duration('/tmp/broken.mp4')

        assert exc.value.error_enum is APIError.MEDIA_PROBE_FAIL
        capture.release.assert_called_once()

    def test_zero_fps(self):
        with patch('cv2.VideoCapture', return_value=self._capture(fps=0.0)):
            with pytest.raises(BusinessError):
                get_video_duration('/tmp/v.mp4')


class TestUploadStaging:

    def test_save_and_discard(self, tmp_path):
        upload = FileStorage(stream=BytesIO(b'frames'), filename='../my clip.mp4')

        path = save_upload(upload, upload_folder=str(tmp_path))

        assert path.startswith(str(tmp_path))
        assert path.endswith('my_clip.mp4')
        with open(path, 'rb') as f:
            assert f.read() == b'frames'

        discard_upload(path, None)
        discard_upload(path)

        assert not (tmp_path / path.split('/')[-1]).exists()

    def test_missing_upload(self, tmp_path):
        assert save_upload(None, upload_folder=str(tmp_path)) is None
        assert save_upload(FileStorage(stream=BytesIO(b''), filename=''), upload_folder=str(tmp_path)) is None
