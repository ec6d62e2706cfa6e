"""Path template compilation and parameter extraction.

Templates are ``/``-separated segments. A segment starting with ``:``
captures one path segment under the name that follows it::

    "/users/:id"            matches "/users/42"    -> {"id": "42"}
    "/orgs/:org/repos/:repo" matches "/orgs/a/repos/b"
"""

import re
from dataclasses import dataclass

from finch.errors import ConfigurationError

PARAM_PREFIX = ":"
SEPARATOR = "/"

# Captured parameter values never span a separator
_PARAM_REGEX = r"[^/]+"
_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass(frozen=True, slots=True)
class PathPattern:
    """A compiled, anchored matcher for one route template."""

    template: str
    regex: re.Pattern[str]
    param_names: tuple[str, ...]

    def match(self, path: str) -> re.Match[str] | None:
        """Match the entire *path*, or return ``None``."""
        return self.regex.fullmatch(path)


def compile_path(template: str) -> PathPattern:
    """Compile a route template into a ``PathPattern``.

    Literal segments are escaped, so ``/v1.0/files`` only matches a
    literal dot. Raises ``ConfigurationError`` for malformed templates
    or repeated parameter names.
    """
    if not isinstance(template, str) or not template.startswith(SEPARATOR):
        msg = f"Route template must be a string starting with '/', got {template!r}"
        raise ConfigurationError(msg)

    parts: list[str] = []
    names: list[str] = []
    for segment in template.split(SEPARATOR):
        if not segment.startswith(PARAM_PREFIX):
            parts.append(re.escape(segment))
            continue

        name = segment[len(PARAM_PREFIX):]
        if not _NAME_RE.fullmatch(name):
            msg = (
                f"Invalid parameter segment {segment!r} in route template {template!r}. "
                "Parameter names must be identifiers, e.g. '/users/:user_id'."
            )
            raise ConfigurationError(msg)
        if name in names:
            msg = f"Duplicate parameter name {name!r} in route template {template!r}"
            raise ConfigurationError(msg)
        names.append(name)
        parts.append(f"(?P<{name}>{_PARAM_REGEX})")

    regex = re.compile(SEPARATOR.join(parts))
    return PathPattern(template=template, regex=regex, param_names=tuple(names))


def extract_params(path: str, pattern: PathPattern) -> dict[str, str]:
    """Return every named parameter of *pattern* captured from *path*.

    Empty when the template has no parameters or *path* does not match.
    """
    match = pattern.match(path)
    if match is None:
        return {}
    return {name: match.group(name) for name in pattern.param_names}
