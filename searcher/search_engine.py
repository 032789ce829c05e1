import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional

from config import HASH_BASE, HASH_MODULUS, OUTPUT_FORMAT, LANGUAGE
from searcher.context_annotator import ContextAnnotator
from searcher.file_handler import FileHandler
from searcher.report import Report
from searcher.rolling_hash import RollingHashMatcher
from searcher.validation import fold_case, parse_radius, validate_hash_parameters, validate_pattern
from utils.messages import message
from utils.result_writer import ResultWriter


@dataclass
class SearchOutcome:
    matches: List[int] = field(default_factory=list)
    report: Report = field(default_factory=Report)
    elapsed: float = 0.0
    output_file: Optional[str] = None


class SearchEngine:
    def __init__(self, base=HASH_BASE, modulus=HASH_MODULUS, output_format=OUTPUT_FORMAT,
                 language=LANGUAGE, file_handler=None):
        validate_hash_parameters(base, modulus)
        self.logger = logging.getLogger(__name__)
        self.language = language
        self.file_handler = file_handler or FileHandler()
        self.matcher = RollingHashMatcher(base, modulus)
        self.annotator = ContextAnnotator()
        self.result_writer = ResultWriter(output_format, language, self.file_handler)

    def load(self, input_file):
        return self.file_handler.read_file(input_file)

    def search(self, text, pattern, radius):
        """
        Runs the matcher over a case-folded copy of text and annotates the
        hits against the original. Validation happens first; nothing is
        searched if the pattern or radius is rejected.
        """
        pattern = validate_pattern(pattern)
        radius = parse_radius(radius)

        search_text = fold_case(text)
        search_pattern = fold_case(pattern)

        start_time = time.perf_counter()
        matches = self.matcher.search(search_text, search_pattern)
        elapsed = time.perf_counter() - start_time
        self.logger.info(message("execution_time", self.language, seconds=elapsed))

        report = self.annotator.annotate(text, matches, pattern, radius)
        if report.is_empty:
            self.logger.info(f"No matches for {pattern!r}")
        else:
            self.logger.info(f"Found {len(matches)} matches for {pattern!r}")

        return SearchOutcome(matches=matches, report=report, elapsed=elapsed)

    def process(self, text, pattern, radius, output_file):
        outcome = self.search(text, pattern, radius)
        self.result_writer.save(outcome.report, output_file)
        outcome.output_file = output_file
        self.logger.info(message("results_saved", self.language, filename=output_file))
        return outcome

    def run(self, input_file, output_file, pattern, radius):
        self.logger.info(f"Searching {input_file}...")
        text = self.load(input_file)
        return self.process(text, pattern, radius, output_file)
