"""
Documentation rendering using Jinja2.

Markdown is rendered from Jinja2 templates; HTML is produced by converting
that Markdown. Templates are looked up in an optional custom directory first
and fall back to the templates bundled with the package.
"""

import logging
from pathlib import Path
from typing import Any

import markdown
from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound

from schema_translate.config import PACKAGE_ROOT
from schema_translate.docs.model import ProviderDocumentation

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES = PACKAGE_ROOT / "templates"

PROVIDER_TEMPLATE = "docs/provider.md.j2"


class TemplateLoader:
    """
    Jinja2 template lookup for documentation pages.

    Templates in ``custom_templates`` shadow the bundled ones of the same
    name; anything not overridden is read from DEFAULT_TEMPLATES.
    """

    def __init__(self, custom_templates: str | Path | None = None):
        self.custom_templates = Path(custom_templates) if custom_templates else None
        self._env: Environment | None = None
        self._templates: dict[str, Template] = {}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "TemplateLoader":
        """Create a loader using the docs.templates_dir setting of a configuration."""
        return cls(config.get("docs", {}).get("templates_dir"))

    def has_custom_templates(self) -> bool:
        """Check if a custom template directory is configured and present."""
        return self.custom_templates is not None and self.custom_templates.is_dir()

    @property
    def search_path(self) -> list[Path]:
        """Directories searched for templates, highest priority first."""
        if self.has_custom_templates():
            return [self.custom_templates, DEFAULT_TEMPLATES]
        return [DEFAULT_TEMPLATES]

    @property
    def env(self) -> Environment:
        if self._env is None:
            self._env = Environment(
                loader=FileSystemLoader([str(p) for p in self.search_path]),
                trim_blocks=True,
                lstrip_blocks=True,
            )
        return self._env

    def load_template(self, template_name: str) -> Template:
        """
        Load a template by name, once per loader.

        Args:
            template_name: Template name relative to a search directory
                (e.g., "docs/provider.md.j2")

        Returns:
            Jinja2 Template; its ``filename`` tells which directory it came from

        Raises:
            FileNotFoundError: If no search directory holds the template
        """
        if template_name not in self._templates:
            try:
                self._templates[template_name] = self.env.get_template(template_name)
            except TemplateNotFound as e:
                searched = ", ".join(str(p) for p in self.search_path)
                raise FileNotFoundError(
                    f"Template '{template_name}' not found in {searched}"
                ) from e
            logger.debug(
                f"Loaded template '{template_name}' from "
                f"{self._templates[template_name].filename}"
            )
        return self._templates[template_name]


def render_markdown(
    documentation: ProviderDocumentation, loader: TemplateLoader | None = None
) -> str:
    """
    Render provider documentation as Markdown.

    Args:
        documentation: Documentation model
        loader: Template loader (bundled templates when None)

    Returns:
        Rendered Markdown
    """
    loader = loader or TemplateLoader()
    template = loader.load_template(PROVIDER_TEMPLATE)
    rendered = template.render(doc=documentation)
    logger.debug(
        f"Rendered documentation for provider '{documentation.provider_name}' "
        f"({len(documentation.resources)} resources)"
    )
    return rendered


def render_html(documentation: ProviderDocumentation, loader: TemplateLoader | None = None) -> str:
    """Render provider documentation as HTML (Markdown converted with tables support)."""
    return markdown.markdown(render_markdown(documentation, loader), extensions=["tables"])


def write_documentation(
    documentation: ProviderDocumentation,
    output_file: Path,
    loader: TemplateLoader | None = None,
) -> Path:
    """
    Render documentation and write it to a file.

    HTML is written for ``.html`` files, Markdown otherwise.

    Returns:
        Path of the written file
    """
    if output_file.suffix == ".html":
        content = render_html(documentation, loader)
    else:
        content = render_markdown(documentation, loader)

    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content)
    logger.info(f"Wrote documentation to {output_file}")
    return output_file
