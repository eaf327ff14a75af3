"""
Template rendering for schema artifact envelopes.

Artifact titles and descriptions are short Jinja2 templates filled with the
artifact name. The output is JSON text, so autoescaping is off.
"""

from typing import Any, Dict
from jinja2 import BaseLoader, Environment, StrictUndefined, TemplateError


class SafeTemplateRenderer:
    """Template renderer using Jinja2 with restricted functionality"""

    def __init__(self):
        self.env = Environment(
            loader=BaseLoader(),
            autoescape=False,
            undefined=StrictUndefined,
            enable_async=False,
            keep_trailing_newline=False,
        )
        self._cache = {}

    def render_template(self, template_string: str, context: Dict[str, Any]) -> str:
        """
        Render a template string with the given context.

        Args:
            template_string: The template string to render
            context: Dictionary of variables available in the template

        Returns:
            Rendered string

        Raises:
            TemplateError: If template rendering fails
        """
        try:
            template = self._cache.get(template_string)
            if template is None:
                template = self.env.from_string(template_string)
                self._cache[template_string] = template
            return template.render(**context)
        except TemplateError as e:
            raise TemplateError(f"Template rendering failed: {e}")


_renderer = None

def get_template_renderer() -> SafeTemplateRenderer:
    """Get the global template renderer instance"""
    global _renderer
    if _renderer is None:
        _renderer = SafeTemplateRenderer()
    return _renderer

def safe_render(template_string: str, **context) -> str:
    """
    Convenience function for template rendering.

    Args:
        template_string: Template to render
        **context: Variables available in template

    Returns:
        Rendered string
    """
    renderer = get_template_renderer()
    return renderer.render_template(template_string, context)
