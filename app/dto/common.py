from dataclasses import dataclass, field
from typing import Any, List, Optional

from bson import ObjectId


@dataclass
class ApiResponse:
    status_code: int
    data: Any = None
    message: str = 'Success'

    @property
    def success(self) -> bool:
        return self.status_code < 400


@dataclass
class PageDto:
    docs: List[Any] = field(default_factory=list)
    total_docs: int = 0
    limit: int = 10
    page: int = 1
    total_pages: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False


@dataclass
class OwnerDto:
    id: str
    full_name: Optional[str] = None
    email: Optional[str] = None
    avatar: Optional[str] = None
    cover_image: Optional[str] = None

    @classmethod
    def from_document(cls, doc) -> Optional['OwnerDto']:
        if doc is None:
            return None
        if isinstance(doc, ObjectId):
            return cls(id=str(doc))
        return cls(
            id=str(doc['_id']),
            full_name=doc.get('fullName'),
            email=doc.get('email'),
            avatar=doc.get('avatar'),
            cover_image=doc.get('coverImage')
        )
