from typing import List, Union

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every error response"""
    statusCode: int
    message: Union[str, List[str]]
    error: str
