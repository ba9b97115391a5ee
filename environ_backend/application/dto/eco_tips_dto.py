from pydantic import BaseModel, Field


class EcoTipRequest(BaseModel):
    message: str = Field(max_length=2000)


class EcoTipResponse(BaseModel):
    reply: str


class RecommendationRequest(BaseModel):
    answer: str = Field(max_length=50)


class RecommendationResponse(BaseModel):
    recommendation: str
