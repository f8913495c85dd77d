"""config_loading.py"""
import logging
import sys
from pathlib import Path

from progopts.cli import parse_check
from progopts.config import loader
from progopts.utils import setup_logging

setup_logging(mode="cli", console_log_level=logging.DEBUG)

options = loader(Path(__file__).parent / "sample.yaml")

if __name__ == "__main__":
    parse_check(options, sys.argv)
    print(options.get("host"), options.get("port"), options.positional)
