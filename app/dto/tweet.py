from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.dto.common import OwnerDto


@dataclass
class TweetDto:
    id: str
    content: str
    owner: Optional[OwnerDto]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'TweetDto':
        return cls(
            id=str(doc['_id']),
            content=doc.get('content'),
            owner=OwnerDto.from_document(doc.get('owner')),
            created_at=doc.get('createdAt'),
            updated_at=doc.get('updatedAt')
        )
