import os
import logging

# ---------------- Logging Setup ----------------

TERMINAL_LOG_LEVEL = logging.INFO

# Marker the provider puts in every duplicate-title message
DUPLICATE_MARKER = "already in the database"

# Create the log/ directory if it doesn't exist
log_dir = "log"
if not os.path.exists(log_dir):
    os.makedirs(log_dir)

# Base level is DEBUG so every message reaches the handlers
logger = logging.getLogger("tomatillos")
logger.setLevel(logging.DEBUG)

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

console_handler = logging.StreamHandler()
console_handler.setLevel(TERMINAL_LOG_LEVEL)
console_handler.setFormatter(formatter)
logger.addHandler(console_handler)


class LevelFilter(logging.Filter):
    def __init__(self, level):
        super().__init__()
        self.level = level

    def filter(self, record):
        return record.levelno == self.level


level_names = {
    logging.CRITICAL: "critical",
    logging.ERROR: "error",
    logging.WARNING: "warning",
    logging.INFO: "info",
    logging.DEBUG: "debug"
}

for level, name in level_names.items():
    file_handler = logging.FileHandler(os.path.join(log_dir, f"{name}.log"))
    file_handler.setLevel(logging.DEBUG)
    file_handler.addFilter(LevelFilter(level))
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

# Titles skipped by duplicate suppression, kept apart for diagnostics
duplicate_handler = logging.FileHandler(os.path.join(log_dir, "duplicate.log"))
duplicate_handler.setLevel(logging.DEBUG)
duplicate_handler.addFilter(
    lambda record: DUPLICATE_MARKER in record.getMessage())
duplicate_handler.setFormatter(formatter)
logger.addHandler(duplicate_handler)
