from marshmallow import Schema, fields, validate

from app.schemas.common_schema import ApiResponseSchema, OwnerSchema
from app.schemas.video import VideoSchema


class PlaylistSchema(Schema):
    id = fields.String(data_key='_id')
    name = fields.String()
    description = fields.String()
    videos = fields.List(fields.String(), metadata={'description': '영상 ID 목록'})
    owner = fields.Nested(OwnerSchema, allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True)


class PlaylistDetailSchema(PlaylistSchema):
    videos = fields.List(fields.Nested(VideoSchema))


class CreatePlaylistRequestSchema(Schema):
    name = fields.String(required=True, validate=validate.Length(min=1, max=100))
    description = fields.String(load_default='', validate=validate.Length(max=1000))


class UpdatePlaylistRequestSchema(Schema):
    name = fields.String(validate=validate.Length(min=1, max=100))
    description = fields.String(validate=validate.Length(min=1, max=1000))


class PlaylistResponseSchema(ApiResponseSchema):
    data = fields.Nested(PlaylistSchema)


class PlaylistListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(PlaylistSchema))


class PlaylistDetailResponseSchema(ApiResponseSchema):
    data = fields.Nested(PlaylistDetailSchema)
