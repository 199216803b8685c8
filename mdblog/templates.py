"""Template rendering engine for mdblog.

This module uses Jinja2 to wrap page bodies in the site layout. A theme
directory may provide ``index.html`` and ``post.html``; any template it
does not provide falls back to the built-in default.

Both templates receive the same variables:
- title: Page title (site title for the homepage, post title otherwise).
- name: Site name.
- contents: Page body HTML, inserted without escaping.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import ChoiceLoader, DictLoader, Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

INDEX_TEMPLATE = "index.html"
POST_TEMPLATE = "post.html"

_BASE_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{% block page_title %}{{ title }}{% endblock %}</title>
</head>
<body>
  <header><a href="index.html">{{ name }}</a></header>
  <main>
{% block main %}{% endblock %}
  </main>
</body>
</html>
"""

DEFAULT_TEMPLATES = {
    "_base.html": _BASE_LAYOUT,
    INDEX_TEMPLATE: (
        '{% extends "_base.html" %}'
        "{% block main %}<h1>{{ title }}</h1>\n{{ contents }}{% endblock %}"
    ),
    POST_TEMPLATE: (
        '{% extends "_base.html" %}'
        "{% block page_title %}{{ title }} - {{ name }}{% endblock %}"
        "{% block main %}<article>\n{{ contents }}</article>{% endblock %}"
    ),
}


class TemplateEngine:
    """Renders the homepage and post pages with Jinja2.

    Attributes:
        theme_dir: Optional directory holding theme templates.
        env: Jinja2 environment.
    """

    def __init__(self, theme_dir: Path | None = None):
        """Initialize the template engine.

        Args:
            theme_dir: Optional directory with ``index.html`` and/or ``post.html``.
        """
        self.theme_dir = theme_dir
        loaders = []
        if theme_dir is not None:
            loaders.append(FileSystemLoader(str(theme_dir)))
        loaders.append(DictLoader(DEFAULT_TEMPLATES))
        self.env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=select_autoescape(["html", "xml"]),
        )

    def render_index(self, title: str, name: str, contents: str) -> str:
        """Render the homepage.

        Args:
            title: Homepage title.
            name: Site name.
            contents: Homepage body built from the post summaries.

        Returns:
            Rendered HTML string.
        """
        return self._render(INDEX_TEMPLATE, title, name, contents)

    def render_post(self, title: str, name: str, contents: str) -> str:
        """Render a single post page.

        Args:
            title: Post title.
            name: Site name.
            contents: Rendered post HTML.

        Returns:
            Rendered HTML string.
        """
        return self._render(POST_TEMPLATE, title, name, contents)

    def _render(self, template_name: str, title: str, name: str, contents: str) -> str:
        template = self.env.get_template(template_name)
        return template.render(title=title, name=name, contents=Markup(contents))
