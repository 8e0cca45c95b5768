from pydantic import BaseModel


class MoveRequest(BaseModel):
    code: str = ""
    from_square: str
    to_square: str
    promotion: str | None = None
