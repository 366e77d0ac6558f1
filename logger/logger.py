import json
import os
from datetime import datetime, timezone

class JSONLogger:
    def __init__(self, output_directory="logs/", log_file_prefix="turing_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        self.current_log = self._get_log_filename()

    def _get_log_filename(self):
        filename = f"{self.log_file_prefix}{self.today}.jsonl"  # JSON lines format
        return os.path.join(self.output_directory, filename)

    def _log_to_file(self, filename, entries):
        path = os.path.join(self.output_directory, filename)
        with open(path, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log(self, entry: dict):
        """Log a single entry to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")

    def log_batch(self, entries: list):
        """Log a batch of entries to the main run log."""
        with open(self.current_log, "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry) + "\n")

    def log_failures(self, entries: list):
        """Log failing cases separately so they can be inspected on their own."""
        filename = f"failures_{self.today}.jsonl"
        self._log_to_file(filename, entries)

    def log_report(self, report, backend):
        """Log every case of a ProblemReport plus a one-line summary."""
        timestamp = datetime.now(timezone.utc).isoformat()
        entries = [case_entry(report, result, backend, timestamp) for result in report.results]
        self.log_batch(entries)

        failures = [entry for entry in entries if not entry["passed"]]
        if failures:
            self.log_failures(failures)

        self.log({
            "problem": report.problem,
            "table_hash": report.table_hash,
            "backend": backend,
            "passed": report.passed,
            "failed": report.failed,
            "summary": True,
            "timestamp": timestamp
        })

def case_entry(report, result, backend, timestamp):
    return {
        "problem": report.problem,
        "table_hash": report.table_hash,
        "backend": backend,
        "case": result.index,
        "input": result.input,
        "expected": result.expected,
        "actual": result.actual,
        "error": type(result.error).__name__ if result.error is not None else None,
        "message": str(result.error) if result.error is not None else None,
        "passed": result.passed,
        "timestamp": timestamp
    }
