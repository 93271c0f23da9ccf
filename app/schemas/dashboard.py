from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema
from app.schemas.video import VideoSchema


class ChannelStatsSchema(Schema):
    total_subscribers = fields.Integer(data_key='totalSubscribers')
    total_videos = fields.Integer(data_key='totalVideos')
    total_views = fields.Integer(data_key='totalViews')
    total_likes = fields.Integer(data_key='totalLikes')


class ChannelStatsResponseSchema(ApiResponseSchema):
    data = fields.Nested(ChannelStatsSchema)


class ChannelVideosResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(VideoSchema))
