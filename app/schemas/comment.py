from marshmallow import Schema, fields, validate

from app.schemas.common_schema import ApiResponseSchema, OwnerSchema, PageSchema
from app.schemas.video import VideoSummarySchema


class CommentSchema(Schema):
    id = fields.String(data_key='_id')
    content = fields.String()
    owner = fields.Nested(OwnerSchema, allow_none=True)
    video = fields.Nested(VideoSummarySchema, allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True)


class CommentPageSchema(PageSchema):
    docs = fields.List(fields.Nested(CommentSchema))


class CommentContentRequestSchema(Schema):
    content = fields.String(
        required=True,
        validate=validate.Length(min=1, max=1000),
        metadata={'description': '댓글 내용 (1~1000자)'}
    )


class CommentResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentSchema)


class CommentPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(CommentPageSchema)
