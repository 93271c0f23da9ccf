"""
MongoDB aggregation 스테이지 빌더

스테이지 순서는 match -> lookup(서브 프로젝션) -> unwind -> sort -> paginate 를 따른다.
"""

import math
import re
from typing import Any, Dict, List, Optional

from app.dto.common import PageDto

Stage = Dict[str, Any]

# 조인되는 사용자 문서에서 노출해도 되는 필드
OWNER_FIELDS = ('fullName', 'email', 'avatar')
CHANNEL_OWNER_FIELDS = ('fullName', 'email', 'avatar', 'coverImage')
VIDEO_SUMMARY_FIELDS = ('title', 'thumbnail', 'duration', 'views', 'owner')

_REGEX_SPECIAL = re.compile(r'[.*+?^${}()|\[\]\\]')


def escape_regex(text: Optional[str]) -> str:
    if not text:
        return ''
    return _REGEX_SPECIAL.sub(lambda m: '\\' + m.group(0), text)


def match(**conditions) -> Stage:
    return {'$match': conditions}


def project_fields(*fields: str) -> Stage:
    return {'$project': {f: 1 for f in fields}}


def lookup(from_collection: str, local_field: str, as_field: Optional[str] = None,
           pipeline: Optional[List[Stage]] = None, foreign_field: str = '_id') -> Stage:
    stage = {
        'from': from_collection,
        'localField': local_field,
        'foreignField': foreign_field,
        'as': as_field or local_field,
    }
    if pipeline:
        stage['pipeline'] = pipeline
    return {'$lookup': stage}


def lookup_user(local_field: str = 'owner', as_field: Optional[str] = None,
                fields=OWNER_FIELDS) -> Stage:
    return lookup('users', local_field, as_field, pipeline=[project_fields(*fields)])


def unwind(field: str) -> Stage:
    return {'$unwind': f'${field}'}


def sort_by(field: str = 'createdAt', direction: int = -1) -> Stage:
    order = {field: direction}
    #NOTE: 동일 값 사이 순서를 고정해야 페이지가 겹치지 않음
    if field != '_id':
        order['_id'] = direction
    return {'$sort': order}


def paginate(page: int, limit: int) -> Stage:
    return {
        '$facet': {
            'docs': [{'$skip': (page - 1) * limit}, {'$limit': limit}],
            'meta': [{'$count': 'total'}],
        }
    }


def read_page(result: List[Dict], page: int, limit: int, convert=None) -> PageDto:
    facet = result[0] if result else {}
    docs = facet.get('docs', [])
    meta = facet.get('meta', [])
    total = meta[0]['total'] if meta else 0
    total_pages = math.ceil(total / limit) if limit else 0

    return PageDto(
        docs=[convert(d) for d in docs] if convert else docs,
        total_docs=total,
        limit=limit,
        page=page,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )
