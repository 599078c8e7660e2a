import re
from typing import List

from core.logging_config import get_logger

logger = get_logger(__name__)

MAX_QUESTIONS = 5

# 빈 줄, 또는 "숫자." 로 시작하는 다음 줄 직전에서 자른다
_SEGMENT_SPLIT = re.compile(r"\n\n|\n(?=\d+\.)")
_NUMBER_MARKER = re.compile(r"^\d+\.")
_LINE_BREAKS = re.compile(r"\n+")


def parse_questions(raw: str) -> List[str]:
    """AI 응답에서 번호가 붙은 질문만 뽑아 최대 5개까지 반환한다.

    번호 형식이 다르면 빈 리스트가 나오며, 호출 측에서 기본 질문으로 대체한다.
    """
    questions: List[str] = []
    for segment in _SEGMENT_SPLIT.split((raw or "").replace("\r\n", "\n")):
        segment = segment.strip()
        if not _NUMBER_MARKER.match(segment):
            continue
        cleaned = _NUMBER_MARKER.sub("", segment, count=1).strip()
        # 여러 줄에 걸친 질문은 한 줄로 합친다
        cleaned = _LINE_BREAKS.sub(" ", cleaned).strip()
        if not cleaned:
            continue
        questions.append(cleaned)
        if len(questions) == MAX_QUESTIONS:
            break

    logger.info("파싱된 질문 수: %d", len(questions))
    return questions


def format_as_markup(raw: str) -> str:
    """마크다운 비슷한 학습 경로 텍스트를 h3/ul/li/p 조각으로 변환한다."""
    out: List[str] = []
    in_list = False

    for line in (raw or "").split("\n"):
        line = line.strip()
        if not line:
            continue

        if line.startswith("## "):
            if in_list:
                out.append("</ul>\n")
                in_list = False
            out.append(f"<h3>{line[3:].strip()}</h3>\n")
        elif line.startswith("- "):
            if not in_list:
                out.append("<ul>\n")
                in_list = True
            out.append(f"<li>{line[2:].strip()}</li>\n")
        else:
            if in_list:
                out.append("</ul>\n")
                in_list = False
            out.append(f"<p>{line}</p>\n")

    if in_list:
        out.append("</ul>\n")

    html = "".join(out)
    logger.info("포맷팅된 학습 경로 길이: %d자", len(html))
    return html
