from pathlib import Path

from core.config import settings
from services.prompt_builder import build_learning_path_prompt, build_question_prompt

PROFILE = "경력: 신입\n희망 직무: Backend Developer\n"


def test_question_prompt_embeds_profile_and_numbered_format():
    prompt = build_question_prompt(PROFILE)
    assert "전문 면접관" in prompt
    assert PROFILE in prompt
    assert "STAR" in prompt
    for n in range(1, 6):
        assert f"{n}. [질문 내용]" in prompt


def test_learning_path_prompt_has_four_sections_in_order():
    prompt = build_learning_path_prompt(PROFILE)
    assert "커리어 컨설턴트" in prompt
    assert PROFILE in prompt
    headings = [line for line in prompt.splitlines() if line.startswith("## ")]
    assert headings == [
        "## 단기 목표 (1-3개월)",
        "## 중기 목표 (3-6개월)",
        "## 장기 목표 (6개월 이상)",
        "## 추천 리소스",
    ]


def test_prompts_do_not_alter_profile_text():
    tricky = "경력: <b>5년</b> & {{ not a tag }}\n"
    assert tricky in build_question_prompt(tricky)
    assert tricky in build_learning_path_prompt(tricky)


def test_templates_live_beside_installed_packages():
    import core.config
    from services.prompt_builder import LEARNING_PATH_TEMPLATE, QUESTION_TEMPLATE

    tpl_dir = Path(settings.template_dir)
    assert tpl_dir == Path(core.config.__file__).resolve().parent.parent / "templates"
    for name in (QUESTION_TEMPLATE, LEARNING_PATH_TEMPLATE):
        assert (tpl_dir / name).is_file()

    pyproject = (tpl_dir.parent / "pyproject.toml").read_text(encoding="utf-8")
    assert 'templates = ["*.j2"]' in pyproject
