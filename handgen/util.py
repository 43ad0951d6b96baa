import logging
import os
import sys


DEBUG = os.getenv('DEBUG')


def setup_basic_logging(**kwargs):
    kwargs.setdefault('stream', sys.stdout)
    kwargs.setdefault('level', logging.DEBUG if DEBUG else logging.INFO)
    logging.basicConfig(format='%(asctime)s %(levelname)s\t%(message)s',
                        datefmt='%Y-%m-%d %X',
                        **kwargs)


def parse_int(text):
    """Parse user input into an int, or None when it isn't one."""
    if text is None or isinstance(text, bool):
        return None
    if isinstance(text, int):
        return text
    try:
        return int(str(text).strip())
    except ValueError:
        return None
