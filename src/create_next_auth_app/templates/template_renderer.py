"""Load and render the Jinja2 templates bundled beside a package."""

import functools

import jinja2


@functools.lru_cache(maxsize=None)
def _environment(package: str) -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.PackageLoader(package, "templates"),
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def render_template(template_name: str, *, package: str, **kwargs) -> str:
    """Render a template from the ``templates`` directory of *package*.

    Output is emitted verbatim: no autoescaping, trailing newline kept.

    Raises:
        jinja2.TemplateNotFound: If the template does not exist.
        jinja2.UndefinedError: If the template uses a variable not supplied.
    """
    template = _environment(package).get_template(template_name)
    return template.render(**kwargs)
