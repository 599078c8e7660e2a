from schemas.interview import InterviewAnalysisReq
from services.profile_text import combined_skills, full_profile_text


def test_all_blank_profile_has_only_default_lines():
    req = InterviewAnalysisReq(front="  ", back="", projectExperience="\n", industry=None)
    assert full_profile_text(req) == "경력: 정보 없음\n희망 직무: 정보 없음\n"


def test_empty_profile_never_renders_none():
    text = full_profile_text(InterviewAnalysisReq())
    assert "None" not in text
    assert "null" not in text


def test_combined_skills_fixed_order_and_blank_omission():
    req = InterviewAnalysisReq(etc="Git", devops="Docker, K8s", front="  ", back="Spring, JPA")
    assert combined_skills(req) == "백엔드: Spring, JPA. DevOps/인프라: Docker, K8s. 기타 기술: Git."


def test_combined_skills_empty_when_no_categories():
    assert combined_skills(InterviewAnalysisReq(front=" ", etc="")) == ""


def test_full_profile_renders_sections_in_order():
    req = InterviewAnalysisReq(
        experience="3년차",
        position="백엔드 개발자",
        front="React",
        projectExperience="쇼핑몰 구축",
        learningGoals="MSA",
        companySize="스타트업",
        industry="핀테크",
    )
    assert full_profile_text(req).splitlines() == [
        "경력: 3년차",
        "희망 직무: 백엔드 개발자",
        "기술 스킬: 프론트엔드: React.",
        "주요 프로젝트 경험: 쇼핑몰 구축",
        "학습 목표 및 관심 분야: MSA",
        "선호 회사 규모: 스타트업",
        "관심 업계: 핀테크",
    ]


def test_request_ignores_unknown_fields():
    req = InterviewAnalysisReq.model_validate({"position": "QA", "salary": "비공개"})
    assert req.position == "QA"
    assert not hasattr(req, "salary")
