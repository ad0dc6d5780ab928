# dentalcare/schemas/common/common.py
from pydantic import BaseModel
from typing import Optional


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: Optional[str] = None
    message: Optional[str] = None


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matchedCount: int = 0
    modifiedCount: int = 0


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deletedCount: int = 0
