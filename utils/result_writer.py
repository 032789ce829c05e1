import csv
import io
import json
import logging

from config import OUTPUT_FORMAT, LANGUAGE, OUTPUT_FORMATS
from searcher.errors import InvalidConfigurationError
from searcher.file_handler import FileHandler
from utils.messages import get_messages, message

FIELDNAMES = ["pattern", "position", "context"]


def _as_bytes(value):
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def _as_text(value):
    return value if isinstance(value, str) else bytes(value).decode("utf-8", errors="replace")


class ResultWriter:
    def __init__(self, output_format=OUTPUT_FORMAT, language=LANGUAGE, file_handler=None):
        self.output_format = output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigurationError(f"Unsupported output format: {output_format} (expected one of {', '.join(OUTPUT_FORMATS)})",
                                            output_format=output_format)
        self.language = language
        self.file_handler = file_handler or FileHandler()
        self.logger = logging.getLogger(__name__)

    def render(self, report):
        """
        Serializes the report to bytes.
        Delegates to specific format handlers based on self.output_format.
        """
        if self.output_format == 'json':
            return self._render_json(report)
        if self.output_format == 'csv':
            return self._render_csv(report)
        return self._render_txt(report)

    def save(self, report, filename):
        content = self.render(report)
        self.file_handler.write_file(filename, content)
        self.logger.info(f"Saved {len(report)} entries as {self.output_format} to {filename}")
        return content

    def _render_txt(self, report):
        if report.is_empty:
            return (message("no_matches", self.language) + "\n").encode("utf-8")

        # Context is spliced in as raw bytes so the original text survives untouched.
        before, _, after = get_messages(self.language)["context"].partition("{context}")
        before = before.encode("utf-8")
        after = after.encode("utf-8")

        chunks = []
        for entry in report:
            header = message("match_found", self.language, pattern=_as_text(entry.pattern), position=entry.position)
            chunks.append(header.encode("utf-8") + b"\n")
            chunks.append(before + _as_bytes(entry.context) + after + b"\n")
        return b"".join(chunks)

    def _render_json(self, report):
        if report.is_empty:
            data = {"message": message("no_matches", self.language), "matches": []}
        else:
            data = [self._row(entry) for entry in report]
        return json.dumps(data, indent=4, ensure_ascii=False).encode("utf-8")

    def _render_csv(self, report):
        buffer = io.StringIO(newline='')
        writer = csv.DictWriter(buffer, fieldnames=FIELDNAMES)
        writer.writeheader()
        for entry in report:
            writer.writerow(self._row(entry))
        return buffer.getvalue().encode("utf-8")

    @staticmethod
    def _row(entry):
        return {
            "pattern": _as_text(entry.pattern),
            "position": entry.position,
            "context": _as_text(entry.context),
        }
