from typing import List, Optional, Tuple

from schemas.interview import InterviewAnalysisReq

NO_INFO = "정보 없음"

SKILL_LABELS: List[Tuple[str, str]] = [
    ("front", "프론트엔드"),
    ("back", "백엔드"),
    ("devops", "DevOps/인프라"),
    ("etc", "기타 기술"),
]

OPTIONAL_SECTIONS: List[Tuple[str, str]] = [
    ("projectExperience", "주요 프로젝트 경험"),
    ("learningGoals", "학습 목표 및 관심 분야"),
    ("companySize", "선호 회사 규모"),
    ("industry", "관심 업계"),
]


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def combined_skills(req: InterviewAnalysisReq) -> str:
    skills = ""
    for field, label in SKILL_LABELS:
        value = getattr(req, field)
        if not is_blank(value):
            skills += f"{label}: {value}. "
    return skills.strip()


def full_profile_text(req: InterviewAnalysisReq) -> str:
    """프롬프트에 들어갈 프로필 요약. 빈 항목은 줄 자체를 생략한다."""
    lines = [
        f"경력: {NO_INFO if is_blank(req.experience) else req.experience}",
        f"희망 직무: {NO_INFO if is_blank(req.position) else req.position}",
    ]

    skills = combined_skills(req)
    if skills:
        lines.append(f"기술 스킬: {skills}")

    for field, label in OPTIONAL_SECTIONS:
        value = getattr(req, field)
        if not is_blank(value):
            lines.append(f"{label}: {value}")

    return "".join(line + "\n" for line in lines)
