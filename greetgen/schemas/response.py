from pydantic import BaseModel


class GenerateResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
