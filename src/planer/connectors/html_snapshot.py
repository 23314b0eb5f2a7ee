# src/planer/connectors/html_snapshot.py

from __future__ import annotations

import contextlib
import html
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
</head>
<body>
<div id="tasksList" class="tasks-list">
{content}
</div>
</body>
</html>
"""


class HtmlSnapshotContainer:
    """
    Task container that writes the rendered markup into a static page.

    Lets the list be opened in a browser while the console drives it.
    Write errors are logged; rendering never fails because of them.
    """

    def __init__(self, path: str | Path, *, title: str = "planer") -> None:
        self._path = Path(path)
        self._title = title

    @property
    def path(self) -> Path:
        return self._path

    def replace_content(self, content: str) -> None:
        page = PAGE_TEMPLATE.format(title=html.escape(self._title), content=content)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(page, "utf-8")
            os.replace(tmp, self._path)
        except OSError:
            logger.exception("Failed to write HTML snapshot to %s", self._path)
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
