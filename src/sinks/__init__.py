from .base_sink import BaseSink
from .console_sink import ConsoleSink
from .csv_file_sink import CsvFileSink

__all__ = ["BaseSink", "ConsoleSink", "CsvFileSink"]
