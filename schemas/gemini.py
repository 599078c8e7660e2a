# Gemini generateContent 요청/응답 스키마
from pydantic import BaseModel, Field
from typing import List, Optional


class GeminiPart(BaseModel):
    text: Optional[str] = None


class GeminiContent(BaseModel):
    parts: List[GeminiPart] = Field(default_factory=list)
    role: Optional[str] = None


class GeminiCandidate(BaseModel):
    content: Optional[GeminiContent] = None
    finishReason: Optional[str] = None


class GeminiResponse(BaseModel):
    candidates: List[GeminiCandidate] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    def first_text(self) -> Optional[str]:
        if not self.candidates:
            return None
        content = self.candidates[0].content
        if content is None or not content.parts:
            return None
        return content.parts[0].text


class GeminiRequest(BaseModel):
    contents: List[GeminiContent]

    @classmethod
    def from_prompt(cls, prompt: str) -> "GeminiRequest":
        return cls(contents=[GeminiContent(parts=[GeminiPart(text=prompt)])])
