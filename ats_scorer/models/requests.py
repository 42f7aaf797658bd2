from pydantic import BaseModel, Field


class ScoreRequest(BaseModel):
    """Resume/JD text pair as produced by the text extractor"""
    resume_text: str = Field(default="", description="Plain resume text (may be empty)")
    job_description: str = Field(default="", description="Plain job description text (may be empty)")


class TextRequest(BaseModel):
    text: str = ""
