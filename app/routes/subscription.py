from flask import g
from flask_smorest import Blueprint

from app.dto.common import ApiResponse
from app.schemas.subscription import SubscriptionListResponseSchema, ToggleSubscriptionResponseSchema
from app.services.subscription_service import SubscriptionService
from common.decorator.auth_decorators import login_required

subscription_blueprint = Blueprint(
    'subscription',
    __name__,
    url_prefix='/api/v1/subscriptions',
    description='구독 API'
)


@subscription_blueprint.route('/c/<channel_id>', methods=['POST'])
@login_required
@subscription_blueprint.response(200, ToggleSubscriptionResponseSchema)
@subscription_blueprint.doc(security=[{"BearerAuth": []}])
def toggle_subscription(channel_id):
    result = SubscriptionService.toggle_subscription(channel_id, g.user_id)
    message = "Subscribed successfully" if result.is_subscribed else "Unsubscribed successfully"

    return ApiResponse(200, result, message)


@subscription_blueprint.route('/c/<channel_id>', methods=['GET'])
@login_required
@subscription_blueprint.response(200, SubscriptionListResponseSchema)
@subscription_blueprint.doc(security=[{"BearerAuth": []}])
def get_channel_subscribers(channel_id):
    subscribers = SubscriptionService.get_channel_subscribers(channel_id)

    return ApiResponse(200, subscribers, "User channel subscribers fetched successfully")


@subscription_blueprint.route('/u/<subscriber_id>', methods=['GET'])
@login_required
@subscription_blueprint.response(200, SubscriptionListResponseSchema)
@subscription_blueprint.doc(security=[{"BearerAuth": []}])
def get_subscribed_channels(subscriber_id):
    channels = SubscriptionService.get_subscribed_channels(subscriber_id)

    return ApiResponse(200, channels, "Subscribed channels fetched successfully")
