from contextlib import AbstractContextManager


class does_not_raise(AbstractContextManager):
    """Reentrant noop context manager.
    Useful to parametrize tests raising and not raising exceptions.

    Example:
    --------
    >>> @pytest.mark.parametrize(
    >>>     "token,expectation",
    >>>     [
    >>>         ("user:pass", does_not_raise()),
    >>>         ("userpass", pytest.raises(InvalidTokenFormat)),
    >>>     ],
    >>> )
    >>> def test_parse_token(token, expectation):
    >>>     with expectation:
    >>>         parse_token(token)
    """

    def __enter__(self):
        return self

    def __exit__(self, *args, **kwargs):
        pass
