from typing import List

from schemas.interview import InterviewAnalysisReq
from services.profile_text import combined_skills, is_blank

ENTRY_LEVEL = "신입"
BASE_SCORE = 5
MAX_SCORE = 10
STATIC_KEYWORDS = ("면접 준비", "기술 스킬")


def quality_score(req: InterviewAnalysisReq) -> int:
    score = BASE_SCORE
    if not is_blank(req.projectExperience):
        score += 2
    if len(combined_skills(req)) > 50:
        score += 2
    if not is_blank(req.learningGoals):
        score += 1
    return min(score, MAX_SCORE)


def priority(req: InterviewAnalysisReq) -> str:
    if req.experience == ENTRY_LEVEL:
        return "HIGH"
    if req.projectExperience is not None and len(req.projectExperience) > 100:
        return "HIGH"
    return "MEDIUM"


def extracted_keywords(req: InterviewAnalysisReq) -> List[str]:
    return [req.position or "", req.experience or "", *STATIC_KEYWORDS]
