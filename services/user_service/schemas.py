from pydantic import BaseModel


class InsertResult(BaseModel):
    acknowledged: bool = True
    insertedId: str
