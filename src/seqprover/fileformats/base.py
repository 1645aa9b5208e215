"""Base class for sequent format handlers."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List

from seqprover.core.logic import Sequent


class FileFormat(ABC):
    """Abstract base class for sequent format handlers.

    Format handlers are responsible for:
    1. Parsing strings and files into Sequent objects
    2. Formatting Sequent objects back to text that parses to the same sequent
    3. Writing sequents to files
    """

    @abstractmethod
    def parse_string(self, content: str, **kwargs) -> Sequent:
        """Parse a single sequent from a string.

        Raises:
            SequentSyntaxError: If the content is not a well-formed sequent
        """
        pass

    @abstractmethod
    def parse_file(self, file_path: Path, **kwargs) -> List[Sequent]:
        """Parse a file holding one sequent per line.

        Raises:
            FileNotFoundError: If file doesn't exist
            SequentSyntaxError: If a line is not a well-formed sequent
        """
        pass

    @abstractmethod
    def format_sequent(self, sequent: Sequent, **kwargs) -> str:
        """Format a Sequent as a string."""
        pass

    @abstractmethod
    def write_file(self, sequents: List[Sequent], file_path: Path, **kwargs) -> None:
        """Write sequents to a file, one per line."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this format."""
        pass

    @property
    @abstractmethod
    def extensions(self) -> List[str]:
        """Return list of file extensions this format handles."""
        pass
