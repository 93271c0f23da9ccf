from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from app.dto.common import OwnerDto
from app.dto.video import VideoDto


@dataclass
class PlaylistDto:
    id: str
    name: str
    description: str
    videos: List[str] = field(default_factory=list)
    owner: Optional[OwnerDto] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'PlaylistDto':
        return cls(
            id=str(doc['_id']),
            name=doc.get('name'),
            description=doc.get('description', ''),
            videos=[str(v) for v in doc.get('videos', [])],
            owner=OwnerDto.from_document(doc.get('owner')),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt')
        )


@dataclass
class PlaylistDetailDto:
    id: str
    name: str
    description: str
    videos: List[VideoDto] = field(default_factory=list)
    owner: Optional[OwnerDto] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'PlaylistDetailDto':
        return cls(
            id=str(doc['_id']),
            name=doc.get('name'),
            description=doc.get('description', ''),
            videos=[VideoDto.from_document(v) for v in doc.get('videos', [])],
            owner=OwnerDto.from_document(doc.get('owner')),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt')
        )
