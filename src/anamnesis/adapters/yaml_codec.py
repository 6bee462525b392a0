import re, io
import logging
import yaml
from typing import Any

logger = logging.getLogger(__name__)

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*\n?", re.DOTALL)


class YamlFrontmatter:
    def decode(self, text: str) -> tuple[dict[str, Any], str]:
        """Split *text* into its frontmatter mapping and the remaining body.

        Notes without frontmatter, or with frontmatter that is not a YAML
        mapping, decode to ``{}`` and the unchanged text.
        """
        m = _FM.match(text)
        if not m:
            return {}, text
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1))) or {}
        except yaml.YAMLError as e:
            logger.warning("ignoring unreadable frontmatter: %s", e)
            return {}, text
        if not isinstance(fm, dict):
            return {}, text
        body = text[m.end() :]
        return (fm, body)

    def frontmatter_end(self, text: str) -> int:
        m = _FM.match(text)
        return m.end() if m else 0
