import mock
import pytest

from uaesm import exceptions
from uaesm.cli import get_parser, main, main_error_handler
from uaesm.cli.disable_esm import action_disable_esm
from uaesm.cli.enable_esm import action_enable_esm
from uaesm.cli.is_esm_enabled import action_is_esm_enabled

M_PATH = "uaesm.entitlements.esm.ESMEntitlement."


class TestParser:
    @pytest.mark.parametrize(
        "args,command,token",
        (
            (["enable-esm", "user:pass"], "enable-esm", "user:pass"),
            (["enable-esm"], "enable-esm", None),
            (["disable-esm"], "disable-esm", None),
            (["is-esm-enabled"], "is-esm-enabled", None),
        ),
    )
    def test_commands_are_registered(self, args, command, token):
        parsed = get_parser().parse_args(args)
        assert command == parsed.command
        assert token == getattr(parsed, "token", None)
        assert not parsed.debug

    def test_debug_flag(self):
        assert get_parser().parse_args(["--debug", "disable-esm"]).debug

    def test_help_lists_commands(self, capsys):
        with pytest.raises(SystemExit):
            get_parser().parse_args(["--help"])
        out = capsys.readouterr()[0]
        for command in ("enable-esm", "disable-esm", "is-esm-enabled"):
            assert command in out


class TestActions:
    @mock.patch(M_PATH + "enable")
    def test_enable_esm_passes_the_token(self, m_enable, FakeConfig):
        args = mock.MagicMock(token="user:pass")
        assert 0 == action_enable_esm(args, cfg=FakeConfig())
        assert [mock.call("user:pass")] == m_enable.call_args_list

    @mock.patch(M_PATH + "disable")
    def test_disable_esm(self, m_disable, FakeConfig):
        assert 0 == action_disable_esm(mock.MagicMock(), cfg=FakeConfig())
        assert 1 == m_disable.call_count

    @pytest.mark.parametrize(
        "action", (action_enable_esm, action_disable_esm)
    )
    @mock.patch("uaesm.util.we_are_currently_root", return_value=False)
    def test_enable_disable_need_root(self, m_root, action, FakeConfig):
        with mock.patch(M_PATH + "enable") as m_enable, mock.patch(
            M_PATH + "disable"
        ) as m_disable:
            with pytest.raises(exceptions.NonRootUserError) as excinfo:
                action(mock.MagicMock(token=None), cfg=FakeConfig())
        assert 2 == excinfo.value.exit_code
        assert 0 == m_enable.call_count
        assert 0 == m_disable.call_count

    @pytest.mark.parametrize("enabled,expected", ((True, 0), (False, 1)))
    @mock.patch("uaesm.util.we_are_currently_root", return_value=False)
    def test_is_esm_enabled_exit_code(
        self, m_root, enabled, expected, FakeConfig, capsys
    ):
        with mock.patch(M_PATH + "is_enabled", return_value=enabled):
            assert expected == action_is_esm_enabled(
                mock.MagicMock(), cfg=FakeConfig()
            )
        assert ("", "") == capsys.readouterr()


class TestMainErrorHandler:
    @pytest.mark.parametrize(
        "exception,exit_code,message",
        (
            (
                exceptions.AlreadyEnabledError(
                    title="Extended Security Maintenance"
                ),
                6,
                "Extended Security Maintenance is already enabled",
            ),
            (exceptions.InvalidToken(), 3, "Invalid token"),
            (exceptions.NonRootUserError(), 2, "must be run as root"),
        ),
    )
    def test_errors_are_printed_with_their_exit_code(
        self, exception, exit_code, message, capsys
    ):
        @main_error_handler
        def raise_error():
            raise exception

        with pytest.raises(SystemExit) as excinfo:
            raise_error()
        assert exit_code == excinfo.value.code
        assert message in capsys.readouterr()[1]

    def test_keyboard_interrupt(self, capsys):
        @main_error_handler
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(SystemExit) as excinfo:
            interrupt()
        assert 1 == excinfo.value.code
        assert "Interrupt received; exiting." in capsys.readouterr()[1]

    def test_unexpected_error(self, capsys):
        @main_error_handler
        def explode():
            raise RuntimeError("kaboom")

        with pytest.raises(SystemExit) as excinfo:
            explode()
        assert 1 == excinfo.value.code
        err = capsys.readouterr()[1]
        assert "Unexpected error(s) occurred: kaboom" in err
        assert "For more details, see the log:" in err


class TestMain:
    @mock.patch("uaesm.cli.log.setup_cli_logging")
    def test_no_arguments_prints_usage(
        self, m_setup_logging, FakeConfig, capsys
    ):
        with mock.patch("uaesm.cli.UAConfig", return_value=FakeConfig()):
            with pytest.raises(SystemExit) as excinfo:
                main(["ubuntu-advantage"])
        assert 1 == excinfo.value.code
        out, err = capsys.readouterr()
        assert "" == out
        assert err.startswith("usage: ubuntu-advantage")

    @mock.patch("uaesm.cli.log.setup_cli_logging")
    def test_action_return_value_is_the_exit_code(
        self, m_setup_logging, FakeConfig
    ):
        cfg = FakeConfig()
        with mock.patch("uaesm.cli.UAConfig", return_value=cfg):
            with mock.patch(M_PATH + "is_enabled", return_value=False):
                assert 1 == main(["ubuntu-advantage", "is-esm-enabled"])
        assert [
            mock.call(cfg.log_level, cfg.log_file)
        ] == m_setup_logging.call_args_list
