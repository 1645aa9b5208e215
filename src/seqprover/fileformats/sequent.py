"""Plain-text sequent format handlers."""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from seqprover.core.logic import Sequent, UNICODE_GLYPHS, ASCII_GLYPHS
from seqprover.core.exceptions import SequentSyntaxError
from .base import FileFormat
from .parser import parse_sequent_string

logger = logging.getLogger(__name__)


class SequentFormat(FileFormat):
    """Handler for sequents written with Unicode glyphs, e.g. ``A ∧ B ⊦ B ∧ A``.

    Both glyphs and ASCII aliases are accepted on input.
    """

    glyphs = UNICODE_GLYPHS

    def parse_string(self, content: str) -> Sequent:
        """Parse a sequent string and return a Sequent object."""
        return parse_sequent_string(content)

    def parse_file(self, file_path: Path) -> List[Sequent]:
        """Parse a file and return its sequents in order."""
        return [sequent for _, sequent in self.iter_file(file_path)]

    def iter_file(self, file_path: Path) -> Iterator[Tuple[int, Sequent]]:
        """Yield ``(line_number, sequent)`` for each sequent line in a file.

        Blank lines and lines starting with ``#`` are skipped.
        """
        with open(file_path, 'r', encoding='utf-8') as f:
            for line_number, line in enumerate(f, start=1):
                line = line.rstrip("\r\n")
                if not line.strip() or line.lstrip().startswith("#"):
                    continue
                try:
                    sequent = self.parse_string(line)
                except SequentSyntaxError as e:
                    raise SequentSyntaxError(
                        f"Line {line_number}: {e.message}", e.position) from e
                logger.debug("Parsed line %d: %s", line_number, sequent)
                yield line_number, sequent

    def format_sequent(self, sequent: Sequent) -> str:
        """Format a Sequent as a string."""
        return sequent.to_string(glyphs=self.glyphs)

    def write_file(self, sequents: List[Sequent], file_path: Path) -> None:
        """Write sequents to a file, one per line."""
        with open(file_path, 'w', encoding='utf-8') as f:
            for sequent in sequents:
                f.write(self.format_sequent(sequent) + "\n")

    @property
    def name(self) -> str:
        return "sequent"

    @property
    def extensions(self) -> List[str]:
        return ['.seq', '.sequent']


class AsciiSequentFormat(SequentFormat):
    """Handler for sequents written with ASCII aliases, e.g. ``A & B > B & A``.

    An empty side is written as nothing, since the empty-set glyph has no alias.
    """

    glyphs = ASCII_GLYPHS

    @property
    def name(self) -> str:
        return "ascii"

    @property
    def extensions(self) -> List[str]:
        return ['.txt']
