from marshmallow import Schema, fields, validate


class ApiResponseSchema(Schema):
    status_code = fields.Integer(data_key='statusCode', metadata={'description': 'HTTP 상태 코드'})
    data = fields.Raw(allow_none=True, dump_default=None)
    message = fields.String(metadata={'description': '안내 메시지'})
    success = fields.Boolean(metadata={'description': '성공 여부'})


class OwnerSchema(Schema):
    id = fields.String(data_key='_id')
    full_name = fields.String(data_key='fullName', allow_none=True)
    email = fields.String(allow_none=True)
    avatar = fields.String(allow_none=True)
    cover_image = fields.String(data_key='coverImage', allow_none=True)


class PageSchema(Schema):
    docs = fields.List(fields.Raw())
    total_docs = fields.Integer(data_key='totalDocs')
    limit = fields.Integer()
    page = fields.Integer()
    total_pages = fields.Integer(data_key='totalPages')
    has_next_page = fields.Boolean(data_key='hasNextPage')
    has_prev_page = fields.Boolean(data_key='hasPrevPage')


class PaginationRequestSchema(Schema):
    page = fields.Integer(load_default=1, validate=validate.Range(min=1))
    limit = fields.Integer(load_default=10, validate=validate.Range(min=1, max=100))
