from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    userQuery: str | None = Field(None, description="User health question")
    lang: str | None = Field(None, description="Language code for the answer")


class ChatResponse(BaseModel):
    text: str | None = None
    error: str | None = None
