from typing import List

from common.decorator.db_decorators import mongo_operation
from common.enum.error_code import APIError
from common.exception.exceptions import BusinessError
from common.extensions import get_mongo_db
from common.utils.logging_utils import get_logger
from common.utils.object_id_utils import to_object_id
from app.models.mongodb import TweetRepository, UserRepository, LikeRepository
from app.dto.tweet import TweetDto

logger = get_logger('tweet_service')


class TweetService:

    @staticmethod
    def _get_own_tweet(tweet_repo: TweetRepository, tweet_id, user_id):
        tweet = tweet_repo.find_by_id(tweet_id)
        if not tweet:
            raise BusinessError(APIError.TWEET_NOT_FOUND)
        if tweet['owner'] != to_object_id(user_id, 'userId'):
            raise BusinessError(APIError.FORBIDDEN)
        return tweet

    @staticmethod
    def _read_joined(tweet_repo: TweetRepository, tweet_id) -> TweetDto:
        doc = tweet_repo.find_joined(tweet_id)
        if doc is None:
            raise BusinessError(APIError.TWEET_NOT_FOUND)
        return TweetDto.from_document(doc)

    @staticmethod
    @mongo_operation
    def create_tweet(user_id: str, content: str) -> TweetDto:
        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()

        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        tweet_repo = TweetRepository(db)
        tweet_id = tweet_repo.insert_tweet(content, owner_id)
        logger.info(f"Tweet {tweet_id} created by {user_id}")

        return TweetService._read_joined(tweet_repo, tweet_id)

    @staticmethod
    @mongo_operation
    def get_user_tweets(user_id: str) -> List[TweetDto]:
        owner_id = to_object_id(user_id, 'userId')
        db = get_mongo_db()

        if not UserRepository(db).exists(owner_id):
            raise BusinessError(APIError.USER_NOT_FOUND)

        return [TweetDto.from_document(doc) for doc in TweetRepository(db).find_by_owner_joined(owner_id)]

    @staticmethod
    @mongo_operation
    def update_tweet(tweet_id: str, user_id: str, content: str) -> TweetDto:
        tweet_oid = to_object_id(tweet_id, 'tweetId')
        tweet_repo = TweetRepository(get_mongo_db())

        TweetService._get_own_tweet(tweet_repo, tweet_oid, user_id)

        if tweet_repo.update_fields(tweet_oid, {'content': content}) is None:
            raise BusinessError(APIError.TWEET_NOT_FOUND)

        return TweetService._read_joined(tweet_repo, tweet_oid)

    @staticmethod
    @mongo_operation
    def delete_tweet(tweet_id: str, user_id: str):
        tweet_oid = to_object_id(tweet_id, 'tweetId')
        db = get_mongo_db()
        tweet_repo = TweetRepository(db)

        TweetService._get_own_tweet(tweet_repo, tweet_oid, user_id)

        if not tweet_repo.delete_by_id(tweet_oid):
            raise BusinessError(APIError.TWEET_NOT_FOUND)
        LikeRepository(db).delete_for_target('tweet', [tweet_oid])

        logger.info(f"Tweet {tweet_id} deleted by {user_id}")
