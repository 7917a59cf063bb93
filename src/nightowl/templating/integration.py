"""Kida environment setup for a site.

Creates a kida Environment from ``SiteConfig``. A user ``template_dir``
is searched before the packaged templates, so any page or component
can be overridden by dropping a file with the same name there.
"""

from collections.abc import Callable
from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from nightowl.config import SiteConfig
from nightowl.templating.filters import BUILTIN_FILTERS


def create_environment(
    config: SiteConfig,
    filters: dict[str, Callable[..., Any]] | None = None,
    globals_: dict[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment from site configuration.

    Called once per ``Site``. The returned environment is shared by
    every render of that site.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("nightowl.templating", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    env.update_filters(BUILTIN_FILTERS)

    # User filters may override built-ins
    if filters:
        env.update_filters(filters)

    env.add_global("site", config)
    for name, value in (globals_ or {}).items():
        env.add_global(name, value)

    return env


def render_template(env: Environment, name: str, context: dict[str, Any]) -> str:
    """Render a full template to string."""
    template = env.get_template(name)
    return template.render(context)
