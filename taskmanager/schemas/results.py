from pydantic import BaseModel
from typing import Optional

# Write acknowledgements, shaped after document-store driver results.


class InsertResult(BaseModel):
    acknowledged: bool = True
    inserted_id: int


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int
    upserted_id: Optional[int] = None


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deleted_count: int
