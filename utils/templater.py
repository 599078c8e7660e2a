from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape
from core.config import settings


_env = Environment(
    loader=FileSystemLoader(settings.template_dir),
    autoescape=select_autoescape([]),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def render_template(name: str, **data) -> str:
    tpl = _env.get_template(name)
    return tpl.render(**data)
