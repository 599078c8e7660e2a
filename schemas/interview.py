from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Optional


class InterviewAnalysisReq(BaseModel):
    """구직자 프로필. 모든 필드는 선택 입력이다."""
    experience: Optional[str] = None
    position: Optional[str] = None
    front: Optional[str] = None
    back: Optional[str] = None
    devops: Optional[str] = None
    etc: Optional[str] = None
    projectExperience: Optional[str] = None
    learningGoals: Optional[str] = None
    companySize: Optional[str] = None
    industry: Optional[str] = None

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


class AnalysisMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    processingTimeMs: int
    aiModel: str
    qualityScore: int = Field(ge=1, le=10)
    analysisTimestamp: str
    priority: str = Field(pattern=r"^(HIGH|MEDIUM|LOW)$")
    extractedKeywords: List[str] = Field(default_factory=list)


class InterviewAnalysisRes(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    interviewQuestions: Optional[List[str]] = Field(default=None, max_length=5)
    learningPath: Optional[str] = None
    errorMessage: Optional[str] = None
    metadata: Optional[AnalysisMetadata] = None

    @model_validator(mode="after")
    def _check_shape(self):
        if self.success:
            if self.interviewQuestions is None or self.learningPath is None:
                raise ValueError("success result requires interviewQuestions and learningPath")
            if self.errorMessage is not None:
                raise ValueError("success result must not carry errorMessage")
        else:
            if not self.errorMessage:
                raise ValueError("failure result requires errorMessage")
            if self.interviewQuestions is not None or self.learningPath is not None or self.metadata is not None:
                raise ValueError("failure result must not carry analysis payload")
        return self

    @classmethod
    def ok(
            cls,
            questions: List[str],
            learning_path: str,
            metadata: Optional[AnalysisMetadata] = None,
    ) -> "InterviewAnalysisRes":
        return cls(
            success=True,
            interviewQuestions=list(questions),
            learningPath=learning_path,
            metadata=metadata,
        )

    @classmethod
    def fail(cls, error_message: str) -> "InterviewAnalysisRes":
        return cls(success=False, errorMessage=error_message)
