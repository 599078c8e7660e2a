from utils.templater import render_template

QUESTION_TEMPLATE = "interview_questions_prompt.j2"
LEARNING_PATH_TEMPLATE = "learning_path_prompt.j2"


def build_question_prompt(profile_text: str) -> str:
    return render_template(QUESTION_TEMPLATE, profile_text=profile_text)


def build_learning_path_prompt(profile_text: str) -> str:
    return render_template(LEARNING_PATH_TEMPLATE, profile_text=profile_text)
