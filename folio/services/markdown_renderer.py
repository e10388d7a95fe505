import logging
import re
from typing import Dict, List, Optional

import markdown
from markdown.extensions.smarty import SmartyExtension

logger = logging.getLogger(__name__)

SMARTY_CONFIG = {
    "smart_quotes": True,
    "smart_ellipses": True,
    "smart_dashes": True,
    "smart_angled_quotes": False,
}
CODEHILITE_CONFIG = {"css_class": "codehilite", "guess_lang": False}

_FENCE_OPEN = re.compile(
    r"^(?P<indent>[ \t]*)(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w+#.-]+)?(?P<rest>.*)$"
)


class BacktickSmartyExtension(SmartyExtension):
    """smarty with ``backtick'' style double quotes."""

    def educateQuotes(self, md):
        patterns = (
            (r"``", (self.substitutions["left-double-quote"],)),
            (r"''", (self.substitutions["right-double-quote"],)),
        )
        # Above the plain quote patterns so '' is never split into two singles
        self._addPatterns(md, patterns, "backticks", 40)
        super().educateQuotes(md)


class MarkdownRenderer:
    def __init__(self, code_aliases: Optional[Dict[str, str]] = None):
        self.code_aliases = dict(code_aliases or {})

    def render(self, text: str) -> str:
        """Render a markdown body to HTML."""
        source = self.apply_code_aliases(text)
        # A Markdown instance keeps state between conversions, so never share it
        md = markdown.Markdown(
            extensions=[
                "extra",
                "toc",
                "sane_lists",
                BacktickSmartyExtension(**SMARTY_CONFIG),
                "codehilite",
            ],
            extension_configs={"codehilite": CODEHILITE_CONFIG},
            output_format="html",
        )
        return md.convert(source)

    def apply_code_aliases(self, text: str) -> str:
        """
        Rewrite opening fence languages, e.g. ```proto -> ```protobuf.

        Lines inside a fenced block are left alone, so markdown samples
        shown in a longer fence keep their own fences verbatim.
        """
        if not self.code_aliases:
            return text

        lines: List[str] = []
        open_fence: Optional[str] = None
        for line in text.splitlines(keepends=True):
            body = line.rstrip("\r\n")
            if open_fence is not None:
                if _closes(body, open_fence):
                    open_fence = None
                lines.append(line)
                continue

            match = _FENCE_OPEN.match(body)
            if match is None or (
                match.group("fence")[0] == "`" and "`" in match.group("rest")
            ):
                lines.append(line)
                continue

            open_fence = match.group("fence")
            lines.append(self._swap_lang(match) + line[len(body):])
        return "".join(lines)

    def _swap_lang(self, match: re.Match) -> str:
        lang = match.group("lang")
        alias = self.code_aliases.get(lang.lower()) if lang else None
        if alias is None:
            return match.group(0)
        logger.debug(f"Rewriting code fence language {lang} -> {alias}")
        return (
            f"{match.group('indent')}{match.group('fence')}{alias}{match.group('rest')}"
        )


def _closes(line: str, fence: str) -> bool:
    """A closing fence uses the same character, at least as many times."""
    stripped = line.strip()
    return (
        len(stripped) >= len(fence)
        and stripped == fence[0] * len(stripped)
    )
