from .base import MongoRepository


class UserRepository(MongoRepository):
    """
    users 콜렉션은 인증 서비스 소유이므로 조회만 한다.
    """

    COLLECTION_NAME = 'users'
