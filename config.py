import os
from dotenv import load_dotenv

load_dotenv()

# Rolling hash parameters. The modulus is small on purpose: collisions are
# frequent and every hash hit is verified against the pattern.
HASH_BASE = int(os.getenv("HASH_BASE", "256"))
HASH_MODULUS = int(os.getenv("HASH_MODULUS", "101"))

OUTPUT_FORMAT = os.getenv("OUTPUT_FORMAT", "txt").lower()
LANGUAGE = os.getenv("LANGUAGE", "en").lower()

LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

OUTPUT_FORMATS = ("txt", "json", "csv")
