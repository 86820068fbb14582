"""Reader for the default line-oriented ``key = value`` format.

Example file (``es.txt``)::

    # Comments start with a hash
    one = uno
    Mailbox.Notification = Hola {0}, tienes {1} emails
    TextWithLineBreakCharacters = Línea Uno\\nLínea Dos
    Path = C:\\\\nuevo
    Beta = [beta] función
    Multiline = [Línea Uno
    Línea Dos
    Línea Tres]

``\\n`` is a line break and ``\\\\`` a literal backslash. A value opens a
multiline block only when it starts with ``[`` and holds no ``]`` on the
same line; ``[value]`` is unwrapped and any other bracketed text is kept
as written.
"""

import os
import re
from typing import BinaryIO, Dict, List, Optional

from portable_i18n.readers.base import LocaleReader

COMMENT_MARKER = "#"
SEPARATOR = "="
ESCAPE_PATTERN = re.compile(r"\\([\\n])")
MULTILINE_OPEN = "["
MULTILINE_CLOSE = "]"


class TextKvpReader(LocaleReader):
    """Parses ``key = value`` text files.

    Escaped line breaks (a backslash followed by ``n``) become real line
    separators, and ``[ ... ]`` values may span several lines.
    """

    def read(self, stream: BinaryIO) -> Dict[str, str]:
        translations: Dict[str, str] = {}
        key: Optional[str] = None
        block: List[str] = []

        for number, raw_line in enumerate(self.decode(stream).splitlines(), start=1):
            line = raw_line.strip()

            if key is not None:
                if line.endswith(MULTILINE_CLOSE):
                    block.append(line[: -len(MULTILINE_CLOSE)])
                    translations[key] = self._render(os.linesep.join(block))
                    key, block = None, []
                else:
                    block.append(line)
                continue

            if not line or line.startswith(COMMENT_MARKER):
                continue

            if SEPARATOR not in line:
                raise ValueError(f"Line {number} is not a 'key = value' pair: {raw_line!r}")

            name, value = (part.strip() for part in line.split(SEPARATOR, 1))
            if not name:
                raise ValueError(f"Line {number} has an empty key")

            if value.startswith(MULTILINE_OPEN):
                inner = value[len(MULTILINE_OPEN):]
                if MULTILINE_CLOSE not in inner:
                    key, block = name, [inner]
                    continue
                if inner.index(MULTILINE_CLOSE) == len(inner) - len(MULTILINE_CLOSE):
                    value = inner[: -len(MULTILINE_CLOSE)]

            translations[name] = self._render(value)

        if key is not None:
            raise ValueError(f"Multiline value for '{key}' is never closed with '{MULTILINE_CLOSE}'")

        return translations

    @staticmethod
    def _render(value: str) -> str:
        return ESCAPE_PATTERN.sub(lambda match: os.linesep if match.group(1) == "n" else "\\", value)
