"""
Stream Scan
===========

Recovers readable character runs from stream ... endstream blocks. Used when
the document's text objects yield too little (e.g. unusual operators).
"""

from pdf_extractor.scanner import ByteScanner

from .base import BaseRecoveryMethod, SourceMethod


class StreamScanMethod(BaseRecoveryMethod):
    """Joins printable runs found inside stream blocks."""

    source = SourceMethod.STREAM_SCAN

    def __init__(self, min_run_length: int = 10):
        super().__init__(name="StreamScan")
        self.min_run_length = min_run_length

    def attempt(self, scanner: ByteScanner) -> str:
        runs: list[str] = []
        for block in scanner.find_blocks(r"\bstream\b", r"\bendstream\b"):
            for run in scanner.find_all_readable_runs(
                self.min_run_length, within=block.content
            ):
                run = run.strip()
                if len(run) >= self.min_run_length:
                    runs.append(run)
        return " ".join(runs)
