from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from app.dto.common import OwnerDto


@dataclass
class SubscriptionDto:
    id: str
    channel: Optional[OwnerDto]
    subscriber: Optional[OwnerDto]
    created_at: Optional[datetime] = None

    @classmethod
    def from_document(cls, doc) -> 'SubscriptionDto':
        return cls(
            id=str(doc['_id']),
            channel=OwnerDto.from_document(doc.get('channel')),
            subscriber=OwnerDto.from_document(doc.get('subscriber')),
            created_at=doc.get('createdAt')
        )


@dataclass
class ToggleSubscriptionDto:
    channel_id: str
    is_subscribed: bool
