from marshmallow import Schema, fields, validate

from app.schemas.common_schema import ApiResponseSchema, OwnerSchema


class TweetSchema(Schema):
    id = fields.String(data_key='_id')
    content = fields.String()
    owner = fields.Nested(OwnerSchema, allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True)


class TweetContentRequestSchema(Schema):
    content = fields.String(
        required=True,
        validate=validate.Length(min=1, max=280),
        metadata={'description': '트윗 내용 (1~280자)'}
    )


class TweetResponseSchema(ApiResponseSchema):
    data = fields.Nested(TweetSchema)


class TweetListResponseSchema(ApiResponseSchema):
    data = fields.List(fields.Nested(TweetSchema))
