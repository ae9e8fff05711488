"""Contains utilities for rendering Jinja2 templates."""

from typing import Any

import jinja2
import structlog
from pydantic import BaseModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def construct_jinja2_environment() -> jinja2.Environment:
    """Construct a Jinja2 environment."""
    jinja_env = jinja2.Environment(undefined=jinja2.StrictUndefined, autoescape=False)
    return jinja_env


def construct_jinja2_template_from_string(template_string: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Construct a Jinja2 template from a string."""
    if environment is None:
        environment = construct_jinja2_environment()
    return environment.from_string(template_string)


def render_template_with_model(model: BaseModel, template: jinja2.Template, **context: Any) -> str:
    """Render a Jinja2 template against a Pydantic model.

    The model's fields become top-level template variables; any extra keyword
    arguments are passed through as additional variables.
    """
    try:
        rendered_template = template.render(**model.model_dump(), **context)
    except jinja2.UndefinedError as exc:
        logger.error("Failed to render template with model", model_type=type(model).__name__, error=str(exc))
        raise
    return rendered_template
