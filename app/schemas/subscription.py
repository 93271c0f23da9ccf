from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema, OwnerSchema


class SubscriptionSchema(Schema):
    id = fields.String(data_key='_id')
    channel = fields.Nested(OwnerSchema, allow_none=True)
    subscriber = fields.Nested(OwnerSchema, allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True)


class ToggleSubscriptionSchema(Schema):
    channel_id = fields.String(data_key='channelId')
    is_subscribed = fields.Boolean(data_key='isSubscribed')


class SubscriptionListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(SubscriptionSchema))


class ToggleSubscriptionResponseSchema(ApiResponseSchema):
    data = fields.Nested(ToggleSubscriptionSchema)
