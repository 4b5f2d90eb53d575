import logging
import sys
from typing import Any, Dict

import yaml

from uaesm import util
from uaesm.messages import BROKEN_YAML_MODULE

LOG = logging.getLogger(util.replace_top_level_logger_name(__name__))


def safe_load(stream) -> Any:
    try:
        return yaml.safe_load(stream)
    except AttributeError as e:
        LOG.exception(e)
        print(BROKEN_YAML_MODULE.format(path=yaml.__path__), file=sys.stderr)
        sys.exit(1)


def load_mapping(content: str) -> Dict[str, Any]:
    """Load a yaml document that is expected to hold a mapping.

    An empty document is an empty mapping.
    """
    data = safe_load(content)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise yaml.YAMLError(
            "expected a mapping, found {}".format(type(data).__name__)
        )
    return data


YAMLError = yaml.YAMLError
