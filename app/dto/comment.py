from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.dto.common import OwnerDto
from app.dto.video import VideoSummaryDto


@dataclass
class CommentDto:
    id: str
    content: str
    owner: Optional[OwnerDto]
    video: Optional[VideoSummaryDto]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'CommentDto':
        video = doc.get('video')
        return cls(
            id=str(doc['_id']),
            content=doc.get('content'),
            owner=OwnerDto.from_document(doc.get('owner')),
            video=VideoSummaryDto.from_document(video) if isinstance(video, dict) else (
                VideoSummaryDto(id=str(video)) if video is not None else None
            ),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt')
        )
