"""Map a classified (project, location) pair to a directory path."""

from __future__ import annotations

from wpgoto.utils.classify import ClassifiedRequest
from wpgoto.utils.errors import UsageError
from wpgoto.utils.themes import ThemeLookupPort

WP_CONTENT_DIR = "wp-content"

# location -> wp_options key holding that theme's directory name
LOCATION_OPTIONS = {
    "parent": "template",
    "child": "stylesheet",
}


def themes_dir(project: str) -> str:
    return f"{project}/{WP_CONTENT_DIR}/themes"


def plugins_dir(project: str) -> str:
    return f"{project}/{WP_CONTENT_DIR}/plugins"


def resolve(request: ClassifiedRequest, theme_lookup: ThemeLookupPort) -> str:
    """Return the directory for *request*, relative to the projects root.

    Only ``parent`` and ``child`` touch *theme_lookup*. Unknown locations
    fall back to the project root.
    """
    project = request.project
    if not project:
        raise UsageError("Insufficient parameters.")

    location = request.location
    if location == "themes":
        return themes_dir(project)
    if location == "plugins":
        return plugins_dir(project)
    if location in LOCATION_OPTIONS:
        theme = theme_lookup.lookup(project, LOCATION_OPTIONS[location])
        return f"{themes_dir(project)}/{theme}"
    # None, "root" and anything unrecognised
    return project
