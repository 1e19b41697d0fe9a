"""Append-only record of completed exchanges + RecordHash helpers."""
import hashlib
from pathlib import Path
from typing import List

from keyexchange.common.protocol import ExchangeResult
from keyexchange.common.utils import now_ms

class ExchangeRecord:
    """Append-only log of exchanges. Never stores private keys or secrets."""

    def __init__(self, filepath: str):
        """Open (and create if needed) the record file.

        Args:
            filepath: Path to record file
        """
        self.filepath = Path(filepath)
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        if not self.filepath.exists():
            self.filepath.touch()

    def append(self, result: ExchangeResult, ts: int = None) -> str:
        """Append one exchange.

        Format: ts | p | g | alice_public | bob_public | key_fingerprint

        Returns:
            The line written (with trailing newline)
        """
        ts = now_ms() if ts is None else ts
        params = result.parameters
        entry = (f"{ts}|{params.p}|{params.g}|{result.alice_public}|"
                 f"{result.bob_public}|{result.key_fingerprint}\n")
        with open(self.filepath, 'a') as f:
            f.write(entry)
        return entry

    def get_entries(self) -> List[str]:
        with open(self.filepath, 'r') as f:
            return [line for line in f.readlines() if line.strip()]

    def count(self) -> int:
        return len(self.get_entries())

    def compute_hash(self) -> str:
        """SHA-256 (hex) of the whole record file."""
        with open(self.filepath, 'rb') as f:
            return hashlib.sha256(f.read()).hexdigest()

def verify_record(record_path: str, record_hash: str) -> bool:
    """True if the record file still hashes to record_hash."""
    return ExchangeRecord(record_path).compute_hash() == record_hash
