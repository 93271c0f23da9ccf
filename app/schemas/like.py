from marshmallow import Schema, fields

from app.schemas.common_schema import ApiResponseSchema
from app.schemas.video import VideoSchema


class ToggleLikeSchema(Schema):
    target_id = fields.String(data_key='targetId')
    target_type = fields.String(data_key='targetType')
    is_liked = fields.Boolean(data_key='isLiked', metadata={'description': '토글 후 좋아요 상태'})


class LikedVideoSchema(Schema):
    id = fields.String(data_key='_id')
    liked_at = fields.DateTime(data_key='likedAt', allow_none=True)
    video = fields.Nested(VideoSchema)


class ToggleLikeResponseSchema(ApiResponseSchema):
    data = fields.Nested(ToggleLikeSchema)


class LikedVideoListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(LikedVideoSchema))
