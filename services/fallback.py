from typing import List

DEFAULT_QUESTIONS = (
    "자기소개를 간단히 해주세요.",
    "이 직무에 지원한 이유는 무엇인가요?",
    "가장 기억에 남는 프로젝트 경험을 설명해주세요.",
    "어려운 기술적 문제를 해결한 경험이 있나요?",
    "앞으로의 커리어 목표는 무엇인가요?",
)

DEFAULT_LEARNING_PATH = (
    "<h3>단기 목표 (1-3개월)</h3>\n"
    "<ul>\n"
    "<li>기본 기술 스택 복습 및 심화 학습</li>\n"
    "<li>포트폴리오 프로젝트 1개 완성</li>\n"
    "</ul>\n"
    "<h3>중기 목표 (3-6개월)</h3>\n"
    "<ul>\n"
    "<li>실무 프로젝트 경험 쌓기</li>\n"
    "<li>새로운 기술 스택 학습</li>\n"
    "</ul>\n"
    "<h3>장기 목표 (6개월 이상)</h3>\n"
    "<ul>\n"
    "<li>전문성 강화 및 깊이 있는 학습</li>\n"
    "<li>커뮤니티 활동 및 지식 공유</li>\n"
    "</ul>\n"
    "<h3>추천 리소스</h3>\n"
    "<ul>\n"
    "<li>공식 문서와 온라인 강의</li>\n"
    "<li>오픈소스 프로젝트 기여</li>\n"
    "</ul>\n"
)

SAMPLE_LEARNING_PATH = "<h3>기본 학습 가이드</h3><ul><li>기초 역량 강화</li><li>실무 경험 쌓기</li></ul>"

SAMPLE_TEMPLATES = (
    "{position} 직무에 대한 이해도를 설명해주세요.",
    "{experience} 경력으로서 가장 도전적이었던 프로젝트는 무엇인가요?",
    "팀워크 경험과 협업 시 중요하게 생각하는 점은 무엇인가요?",
    "기술적 성장을 위해 어떤 노력을 하고 계신가요?",
    "향후 {position} 분야에서의 목표는 무엇인가요?",
)


def default_questions() -> List[str]:
    return list(DEFAULT_QUESTIONS)


def default_learning_path() -> str:
    return DEFAULT_LEARNING_PATH


def sample_questions(position: str, experience: str) -> List[str]:
    return [tpl.format(position=position, experience=experience) for tpl in SAMPLE_TEMPLATES]


def sample_learning_path() -> str:
    return SAMPLE_LEARNING_PATH
