from pydantic import BaseModel


class UrlResponse(BaseModel):
    url: str


class ErrorResponse(BaseModel):
    detail: str
