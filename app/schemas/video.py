from flask_smorest.fields import Upload
from marshmallow import Schema, fields, validate

from app.schemas.common_schema import ApiResponseSchema, OwnerSchema, PageSchema, PaginationRequestSchema


class VideoSchema(Schema):
    id = fields.String(data_key='_id')
    video_file = fields.String(data_key='videoFile')
    thumbnail = fields.String()
    title = fields.String()
    description = fields.String()
    duration = fields.Float()
    views = fields.Integer()
    is_published = fields.Boolean(data_key='isPublished')
    owner = fields.Nested(OwnerSchema, allow_none=True)
    created_at = fields.DateTime(data_key='createdAt', allow_none=True)
    updated_at = fields.DateTime(data_key='updatedAt', allow_none=True)


class VideoSummarySchema(Schema):
    id = fields.String(data_key='_id')
    title = fields.String(allow_none=True)
    thumbnail = fields.String(allow_none=True)
    duration = fields.Float(allow_none=True)
    views = fields.Integer(allow_none=True)
    owner = fields.String(allow_none=True)


class VideoPageSchema(PageSchema):
    docs = fields.List(fields.Nested(VideoSchema))


class GetAllVideosRequestSchema(PaginationRequestSchema):
    user_id = fields.String(data_key='userId', required=True, metadata={'description': '영상 소유자 ID'})
    query = fields.String(load_default=None, metadata={'description': '제목/설명 검색어 (대소문자 무시)'})
    sort_by = fields.String(
        data_key='sortBy',
        load_default='createdAt',
        validate=validate.OneOf(['createdAt', 'views', 'duration', 'title'])
    )
    sort_type = fields.String(
        data_key='sortType',
        load_default='desc',
        validate=validate.OneOf(['asc', 'desc'])
    )


class PublishVideoFormSchema(Schema):
    title = fields.String(required=True, validate=validate.Length(min=1, max=200))
    description = fields.String(required=True, validate=validate.Length(min=1, max=5000))


class PublishVideoFilesSchema(Schema):
    video_file = Upload(data_key='videoFile', metadata={'description': '영상 파일'})
    thumbnail = Upload(metadata={'description': '썸네일 이미지'})


class UpdateVideoFormSchema(Schema):
    title = fields.String(validate=validate.Length(min=1, max=200))
    description = fields.String(validate=validate.Length(min=1, max=5000))


class UpdateVideoFilesSchema(Schema):
    thumbnail = Upload(metadata={'description': '새 썸네일 이미지'})


class PublishStatusSchema(Schema):
    id = fields.String(data_key='_id')
    is_published = fields.Boolean(data_key='isPublished')


class VideoResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoSchema, allow_none=True)


class VideoPageResponseSchema(ApiResponseSchema):
    data = fields.Nested(VideoPageSchema)


class PublishStatusResponseSchema(ApiResponseSchema):
    data = fields.Nested(PublishStatusSchema)
