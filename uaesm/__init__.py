import logging

logging.getLogger("ubuntu-advantage").addHandler(logging.NullHandler())
