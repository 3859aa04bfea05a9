"""
PTGen Color Log Formatter - ANSI Color-Coded Log Message Formatting

PURPOSE:
    Colors console log output by severity. Colors are left out when the
    formatter is created with color=False (main.py does this when stderr is
    not a terminal or NO_COLOR is set).

WHO READS ME:
    - main.py: setup_logging() installs CustomFormatter on the root handlers

COLOR SCHEME:
    - DEBUG: Grey
    - INFO: Cyan
    - WARNING: Yellow
    - ERROR: Red
    - CRITICAL: Bold Red

LOG FORMAT:
    %(asctime)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)
    Example: "2026-10-18 13:04:26,789 - INFO - Config compiled for R1 - (compiler.py:102)"
"""

import logging


class CustomFormatter(logging.Formatter):
    """return a formatter that prints log messages with color"""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    cyan = "\x1b[36;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"
    template = "%(asctime)s - %(levelname)s - %(message)s - (%(filename)s:%(lineno)d)"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: cyan,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red,
    }

    def __init__(self, color: bool = True):
        super().__init__(self.template)
        self.color = color
        self._formatters = {
            level: logging.Formatter(code + self.template + self.reset)
            for level, code in self.COLORS.items()
        }

    def format(self, record):
        if not self.color:
            return super().format(record)
        formatter = self._formatters.get(record.levelno)
        if formatter is None:
            return super().format(record)
        return formatter.format(record)
