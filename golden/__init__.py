# Golden Package
from golden.store import GoldenStore
from golden.file_store import FileGoldenStore
from golden.matcher import GoldenOutcome, GoldenStatus, golden_file_name, match_golden

__all__ = [
    "GoldenStore",
    "FileGoldenStore",
    "GoldenOutcome",
    "GoldenStatus",
    "golden_file_name",
    "match_golden",
]
