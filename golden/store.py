"""
Golden Store Interface

Abstract interface for persisting expected export payloads.
Storage-agnostic - the harness ships a file-backed implementation.

DESIGN RULES:
- Documents are whole export bodies, written verbatim
- Read failures raise GoldenFileError, never a comparison mismatch
- No locking: one writer per document name per run
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict


class GoldenStore(ABC):
    """
    Abstract base for golden document persistence.

    Implementations:
    - FileGoldenStore (pretty-printed JSON, local)
    """

    @abstractmethod
    def path_for(self, name: str) -> Path:
        """Location of the named document."""
        pass

    @abstractmethod
    def exists(self, name: str) -> bool:
        pass

    @abstractmethod
    def read(self, name: str) -> Dict[str, Any]:
        """
        Load a stored document.

        Raises:
            GoldenFileError: if the document cannot be read or parsed
        """
        pass

    @abstractmethod
    def write(self, name: str, data: Dict[str, Any]) -> Path:
        """Create or overwrite a document. Returns where it was written."""
        pass
