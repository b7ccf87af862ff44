"""mdformat plugin applying the configured bullet marker and code fence character"""

import re

from mdimport.config import Settings


_TILDE_RUN_RE = re.compile(r'~+')


def _alternate(bullet: str) -> str:
    """Marker used where mdformat switches markers to keep adjacent lists apart."""
    return '-' if bullet != '-' else '*'


class MarkdownStyle:
    """Renderer plugin: rewrites mdformat's default list markers and fences.

    mdformat emits '-' (and '*' for an adjacent sibling list) and backtick
    fences. Top-level item lines are the only column-0 markers in a
    bullet_list's own text; nested lists are already indented.
    """

    RENDERERS: dict = {}

    def __init__(self, settings: Settings):
        self.bullet = settings.bullet
        self.fence = settings.fence
        self.POSTPROCESSORS = {
            'bullet_list': self._bullet_list,
            'fence': self._fence,
        }

    @staticmethod
    def update_mdit(mdit) -> None:
        """No parser changes; rendering only."""

    def _bullet_list(self, text: str, node, context) -> str:
        swap = {'-': self.bullet, '*': _alternate(self.bullet)}
        lines = []
        for line in text.split('\n'):
            if line[:1] in swap and (len(line) == 1 or line[1] == ' '):
                line = swap[line[0]] + line[1:]
            lines.append(line)
        return '\n'.join(lines)

    def _fence(self, text: str, node, context) -> str:
        if self.fence != '~' or not text.startswith('`'):
            return text
        lines = text.split('\n')
        opening = lines[0].lstrip('`')
        body = lines[1:-1]
        longest = max((len(m) for line in body for m in _TILDE_RUN_RE.findall(line)), default=0)
        marker = '~' * max(3, longest + 1)
        return '\n'.join([marker + opening, *body, marker])
