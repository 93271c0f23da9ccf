from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.common_schema import ApiResponseSchema
from app.schemas.tweet import TweetContentRequestSchema, TweetResponseSchema, TweetListResponseSchema
from app.services.tweet_service import TweetService
from common.decorator.auth_decorators import login_required

tweet_blueprint = Blueprint(
    'tweet',
    __name__,
    url_prefix='/api/v1/tweets',
    description='트윗 API'
)


@tweet_blueprint.route('', methods=['POST'])
@login_required
@tweet_blueprint.arguments(TweetContentRequestSchema)
@tweet_blueprint.response(200, TweetResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def create_tweet(data):
    tweet = TweetService.create_tweet(g.user_id, data['content'])

    return ApiResponse(200, tweet, "Created tweet successfully")


@tweet_blueprint.route('/user/<user_id>', methods=['GET'])
@login_required
@tweet_blueprint.response(200, TweetListResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def get_user_tweets(user_id):
    tweets = TweetService.get_user_tweets(user_id)

    return ApiResponse(200, tweets, "User tweets fetched successfully")


@tweet_blueprint.route('/<tweet_id>', methods=['PATCH'])
@login_required
@tweet_blueprint.arguments(TweetContentRequestSchema)
@tweet_blueprint.response(200, TweetResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def update_tweet(data, tweet_id):
    tweet = TweetService.update_tweet(tweet_id, g.user_id, data['content'])

    return ApiResponse(200, tweet, "Tweet updated successfully")


@tweet_blueprint.route('/<tweet_id>', methods=['DELETE'])
@login_required
@tweet_blueprint.response(200, ApiResponseSchema)
@tweet_blueprint.doc(security=[{"BearerAuth": []}])
def delete_tweet(tweet_id):
    TweetService.delete_tweet(tweet_id, g.user_id)

    return ApiResponse(200, {}, "Tweet deleted successfully")
