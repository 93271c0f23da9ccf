import mongomock
import pytest

from app import create_app
from common.utils import create_access_token


@pytest.fixture(scope='session')
def app():
    return create_app('testing', mongo_client=mongomock.MongoClient())


@pytest.fixture
def db(app):
    database = app.mongo
    yield database
    for name in database.list_collection_names():
        database.drop_collection(name)


@pytest.fixture
def app_ctx(app):
    with app.app_context():
        yield


@pytest.fixture
def client(app):
    return app.test_client()


def _insert_user(db, username, full_name):
    return db.users.insert_one({
        'username': username,
        'fullName': full_name,
        'email': f'{username}@example.com',
        'avatar': f'https://cdn.example.com/{username}.png',
        'coverImage': f'https://cdn.example.com/{username}-cover.png',
        'password': 'hashed-password',
        'refreshToken': 'refresh-token'
    }).inserted_id


@pytest.fixture
def user_id(db):
    return _insert_user(db, 'alice', 'Alice Kim')


@pytest.fixture
def other_user_id(db):
    return _insert_user(db, 'bob', 'Bob Lee')


@pytest.fixture
def token(app, user_id):
    with app.app_context():
        return create_access_token(str(user_id))


@pytest.fixture
def auth_headers(token):
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def video_doc(db, user_id):
    def _make(owner=None, title='First video', views=0):
        doc = {
            'videoFile': 'https://res.cloudinary.com/demo/video/upload/v1700000000/abc123.mp4',
            'thumbnail': 'https://res.cloudinary.com/demo/image/upload/v1700000000/thumb123.png',
            'title': title,
            'description': 'A description',
            'duration': 12.5,
            'views': views,
            'isPublished': True,
            'owner': owner or user_id
        }
        doc['_id'] = db.videos.insert_one(doc).inserted_id
        return doc
    return _make
