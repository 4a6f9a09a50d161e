from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    provider: str | None = Field(default=None, description="Provider name: 'openai' or 'gemini'")
    model: str | None = Field(default=None, description="Provider model identifier")
    prompt: str | None = Field(default=None, description="Prompt to send to the model")


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str
