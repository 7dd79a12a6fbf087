"""
Source lookup for the code explorer.

Given the view that handled a request and the template that rendered it,
find their source files and return the relevant lines as SourceSnippet
values for code_explorer/source_code.html.

Views are located with the inspect module. Templates are located by name
under CODE_EXPLORER_TEMPLATES_DIR; the source already held by the template
engine wins over the file on disk.
"""

from __future__ import annotations

import inspect
import logging
import textwrap
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel, PositiveInt

logger = logging.getLogger(__name__)

INDENT = "    "


class SourceSnippet(BaseModel):
    """A range of lines taken from one source file."""

    file_path: str
    starting_line: PositiveInt
    source_code: str


def get_callable_reflector(controller: Any) -> Any:
    """
    Return the function, method or class whose source describes controller.

    - (obj_or_class, "method") pairs resolve to that attribute
    - class-based views (View.as_view()) resolve to their view class
    - functions and methods resolve to themselves, unwrapped past
      functools.wraps decorators
    - other callable objects resolve to their class's __call__

    Raises:
        AttributeError: the named method does not exist
        TypeError: controller is not something inspect can locate
    """
    if isinstance(controller, (tuple, list)):
        target, method_name = controller
        return inspect.unwrap(getattr(target, method_name))

    view_class = getattr(controller, "view_class", None)
    if view_class is not None:
        return view_class

    if inspect.isfunction(controller) or inspect.ismethod(controller):
        return inspect.unwrap(controller)

    if callable(controller) and not inspect.isclass(controller):
        return type(controller).__call__

    raise TypeError(f"Cannot locate source for controller {controller!r}")


def get_controller_source(controller: Any) -> SourceSnippet | None:
    """
    Build the snippet for the view that handled the request.

    Returns None when there is no controller (Django's own 404/500 pages).
    Lookup and read errors are not caught.
    """
    if controller is None:
        return None

    reflector = get_callable_reflector(controller)

    file_path = inspect.getsourcefile(reflector)
    if file_path is None:
        raise OSError(f"No source file for {reflector!r}")

    lines, start_line = inspect.getsourcelines(reflector)
    method_code = "".join(lines)

    comments = inspect.getcomments(reflector)
    if comments:
        method_code = textwrap.indent(comments, INDENT) + method_code

    return SourceSnippet(
        file_path=file_path,
        starting_line=start_line,
        source_code=unindent_code(method_code),
    )


def get_template_path(template_name: str, templates_dir: str | Path) -> Path:
    """Map "app:page.html" style names to a file under templates_dir."""
    return Path(templates_dir) / template_name.replace(":", "/")


def get_template_source(
    template: Any,
    template_name: str,
    templates_dir: str | Path,
) -> SourceSnippet:
    """
    Build the snippet for a template.

    Templates are not always stored in files, but here every template is
    assumed to live under templates_dir. The engine's in-memory source is
    used when it has one; otherwise the file is read and a missing or
    unreadable file yields an empty snippet.
    """
    file_path = get_template_path(template_name, templates_dir)

    source_code = getattr(template, "source", "") or ""
    if not source_code:
        try:
            source_code = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Template source unavailable for %s: %s", file_path, exc)
            source_code = ""

    return SourceSnippet(
        file_path=str(file_path),
        starting_line=1,
        source_code=source_code,
    )


def unindent_code(code: str) -> str:
    """
    Strip one level of four-space indentation when every line has it.

    Empty lines count as indented. If any other line does not start with
    four spaces the code is returned untouched.
    """
    code_lines = code.split("\n")

    indented_lines = [
        line for line in code_lines if line == "" or line[:4] == INDENT
    ]
    if len(indented_lines) != len(code_lines):
        return code

    return "\n".join(line[4:] for line in code_lines)


def build_source_context(
    template: Any,
    template_name: str,
    templates_dir: str | Path,
    controller: Callable | None = None,
) -> dict[str, dict[str, Any] | None]:
    """Values for code_explorer/source_code.html."""
    controller_source = get_controller_source(controller)
    template_source = get_template_source(template, template_name, templates_dir)

    return {
        "controller": controller_source.model_dump() if controller_source else None,
        "template": template_source.model_dump(),
    }
