"""Renders changelog sections as JSON or markdown."""

import functools

import jinja2
import structlog
from pydantic_core import PydanticSerializationError

from github_changelog.utils.constants import DEFAULT_GITHUB_SERVER_URL
from github_changelog.utils.github import strip_trailing_slash
from github_changelog.utils.templates import construct_jinja2_template_from_string, render_template_with_model

from .exceptions import RenderError
from .models import Changelog, OutputFormat, Section

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

SECTION_TEMPLATE = (
    "## [{{ to_revision }}]({{ server_url }}/{{ owner }}/{{ repo }}/releases/tag/{{ to_revision }})"
    "{% if changed_at %} ({{ changed_at.strftime('%Y-%m-%d') }}){% endif %}\n"
    "{% for pull_request in pull_requests %}\n"
    "* {{ pull_request.title }}"
    " [#{{ pull_request.number }}]({{ server_url }}/{{ owner }}/{{ repo }}/pull/{{ pull_request.number }})"
    " ([{{ pull_request.user.login }}]({{ server_url }}/{{ pull_request.user.login }}))\n"
    "{%- endfor %}"
)
"""Markdown for one section: a heading linking the release, then one bullet per pull request."""


@functools.cache
def get_section_template() -> jinja2.Template:
    """Compile the section template once per process."""
    return construct_jinja2_template_from_string(SECTION_TEMPLATE)


def render_section_markdown(section: Section | None, server_url: str = DEFAULT_GITHUB_SERVER_URL) -> str:
    """Render one section as markdown."""
    if section is None:
        raise RenderError("Cannot render a missing section")
    try:
        return render_template_with_model(section, get_section_template(), server_url=strip_trailing_slash(server_url))
    except jinja2.TemplateError as exc:
        raise RenderError(f"Failed to render section '{section.to_revision}': {exc}") from exc


def render_changelog_markdown(changelog: Changelog, server_url: str = DEFAULT_GITHUB_SERVER_URL) -> str:
    """Render every section as markdown, separated by blank lines.

    A section that fails to render is logged and left out so the remaining
    sections still make it into the document.
    """
    rendered_sections: list[str] = []
    for section in changelog.sections:
        try:
            rendered_sections.append(render_section_markdown(section, server_url))
        except RenderError as exc:
            logger.error("Skipping section that failed to render", error=str(exc))
    return "\n\n".join(rendered_sections)


def render_json(item: Section | Changelog | None) -> str:
    """Serialize a section or changelog as indented JSON."""
    if item is None:
        raise RenderError("Cannot render a missing section")
    try:
        return item.model_dump_json(indent=2, by_alias=True)
    except PydanticSerializationError as exc:
        raise RenderError(f"Failed to serialize {type(item).__name__}: {exc}") from exc


def render(
    item: Section | Changelog | None,
    output_format: OutputFormat = OutputFormat.JSON,
    server_url: str = DEFAULT_GITHUB_SERVER_URL,
) -> str:
    """Render a section or changelog in the requested format."""
    if output_format == OutputFormat.JSON:
        return render_json(item)
    if isinstance(item, Changelog):
        return render_changelog_markdown(item, server_url)
    return render_section_markdown(item, server_url)
