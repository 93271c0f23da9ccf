from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.dto.common import OwnerDto


@dataclass
class VideoDto:
    id: str
    video_file: str
    thumbnail: str
    title: str
    description: str
    duration: float
    views: int
    is_published: bool
    owner: Optional[OwnerDto]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'VideoDto':
        return cls(
            id=str(doc['_id']),
            video_file=doc.get('videoFile'),
            thumbnail=doc.get('thumbnail'),
            title=doc.get('title'),
            description=doc.get('description'),
            duration=doc.get('duration', 0),
            views=doc.get('views', 0),
            is_published=bool(doc.get('isPublished', False)),
            owner=OwnerDto.from_document(doc.get('owner')),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt')
        )


@dataclass
class VideoSummaryDto:
    id: str
    title: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[float] = None
    views: Optional[int] = None
    owner: Optional[str] = None

    @classmethod
    def from_document(cls, doc) -> Optional['VideoSummaryDto']:
        if doc is None:
            return None
        return cls(
            id=str(doc['_id']),
            title=doc.get('title'),
            thumbnail=doc.get('thumbnail'),
            duration=doc.get('duration'),
            views=doc.get('views'),
            owner=str(doc['owner']) if doc.get('owner') is not None else None
        )


@dataclass
class PublishStatusDto:
    id: str
    is_published: bool
