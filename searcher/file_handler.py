import os
import logging

from searcher.errors import InputReadError, OutputWriteError


class FileHandler:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def read_file(self, filename):
        """
        Reads the whole file as bytes.
        Raises InputReadError if it cannot be opened or read.
        """
        try:
            with open(filename, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise InputReadError(f"Couldn't open the file {filename}: {e.strerror or e}", filename=filename) from e

        self.logger.info(f"Read {len(content)} bytes from {filename}")
        return content

    def write_file(self, filename, content):
        """
        Writes content (bytes) to filename, replacing whatever was there.
        Raises OutputWriteError on failure.
        """
        try:
            # Ensure directory exists
            directory = os.path.dirname(filename)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(filename, 'wb') as f:
                f.write(content)
        except OSError as e:
            raise OutputWriteError(f"Couldn't write to the file {filename}: {e.strerror or e}", filename=filename) from e

        self.logger.info(f"Wrote {len(content)} bytes to {filename}")
