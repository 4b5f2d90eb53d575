from functools import wraps

from uaesm import exceptions, util


def assert_root(f):
    """Decorator asserting root user"""

    @wraps(f)
    def new_f(*args, **kwargs):
        if not util.we_are_currently_root():
            raise exceptions.NonRootUserError()
        return f(*args, **kwargs)

    return new_f
