from pydantic import BaseModel

from schemas.user import UserForListDto


class TokenResponse(BaseModel):
    """
    Ответ при успешном логине.
    """
    token: str
    user: UserForListDto
