from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.dto.video import VideoDto


@dataclass
class ToggleLikeDto:
    target_id: str
    target_type: str  # video / comment / tweet
    is_liked: bool


@dataclass
class LikedVideoDto:
    id: str  # like 문서 ID
    liked_at: Optional[datetime]
    video: VideoDto

    @classmethod
    def from_document(cls, doc) -> 'LikedVideoDto':
        return cls(
            id=str(doc['_id']),
            liked_at=doc.get('createdAt'),
            video=VideoDto.from_document(doc['video'])
        )
