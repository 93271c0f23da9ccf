from datetime import datetime, timezone
from typing import Dict, List, Optional

from bson import ObjectId
from pymongo import ReturnDocument


def utcnow():
    return datetime.now(timezone.utc)


class MongoRepository:
    """컬렉션 단위 공통 CRUD"""

    COLLECTION_NAME = None

    def __init__(self, db):
        self.collection = db[self.COLLECTION_NAME]
        self.ensure_indexes()

    def ensure_indexes(self):
        pass

    def insert(self, document: Dict) -> ObjectId:
        now = utcnow()
        document.setdefault('createdAt', now)
        document.setdefault('updatedAt', now)
        return self.collection.insert_one(document).inserted_id

    def find_by_id(self, object_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one({'_id': object_id})

    def exists(self, object_id: ObjectId) -> bool:
        return self.collection.count_documents({'_id': object_id}, limit=1) > 0

    def update_fields(self, object_id: ObjectId, fields: Dict) -> Optional[Dict]:
        return self.collection.find_one_and_update(
            {'_id': object_id},
            {'$set': {**fields, 'updatedAt': utcnow()}},
            return_document=ReturnDocument.AFTER
        )

    def delete_by_id(self, object_id: ObjectId) -> bool:
        return self.collection.delete_one({'_id': object_id}).deleted_count == 1

    def aggregate(self, pipeline: List[Dict]) -> List[Dict]:
        return list(self.collection.aggregate(pipeline))

    def ids_by_owner(self, owner_id: ObjectId) -> List[ObjectId]:
        return [doc['_id'] for doc in self.collection.find({'owner': owner_id}, {'_id': 1})]
