"""Tests for '?' queries and tab completion."""

from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document

from netshell_lib.device.clock import MONTHS
from netshell_lib.errors import UnknownCommand
from netshell_lib.modes.graph import Mode
from netshell_lib.repl.completer import (
    NO_MORE_OPTIONS,
    CommandCompleter,
    complete_line,
    query_lines,
    resolve_candidates,
    split_partial,
)
from netshell_lib.repl.hints import lookup_position_hint


def _values(resolution):
    return [c.value for c in resolution.candidates]


class TestSplitPartial:
    def test_trailing_space(self):
        assert split_partial("show ") == (["show"], "")

    def test_partial_word(self):
        assert split_partial("show ve") == (["show"], "ve")

    def test_empty(self):
        assert split_partial("") == ([], "")


class TestFirstToken:
    def test_empty_line_offers_allowed_commands(self, session):
        resolution = resolve_candidates(session, "")
        assert _values(resolution) == sorted(session.allowed_commands())

    def test_allowed_set_follows_mode(self, session, run):
        run(session, "enable", "config network_manager", "config vlan")
        values = _values(resolve_candidates(session, ""))
        assert "bridge_name" in values
        assert "show" not in values

    def test_prefix_filter(self, session):
        assert _values(resolve_candidates(session, "d")) == ["dhcp_enable", "disable", "do"]

    def test_prefix_filter_is_case_sensitive(self, session, run):
        assert _values(resolve_candidates(session, "EN")) == []
        assert complete_line(session, "EN") == (0, [])
        assert isinstance(run(session, "EN").error, UnknownCommand)

    def test_descriptions_in_query(self, session):
        lines = query_lines(session, "")
        assert lines[0] == "Possible completions:"
        assert any(line.startswith("  show") and "Display system information" in line
                   for line in lines)


class TestArguments:
    def test_show_hints_in_user_mode(self, session):
        assert _values(resolve_candidates(session, "show ")) == [
            "version", "clock", "uptime", "controllers", "history", "sessions", "arp",
        ]

    def test_show_hints_in_privileged_mode(self, session, run):
        run(session, "enable")
        values = _values(resolve_candidates(session, "show "))
        assert values[:2] == ["running-config", "startup-config"]
        assert "controllers" not in values

    def test_abbreviated_command(self, session):
        assert _values(resolve_candidates(session, "sh ve")) == ["version"]

    def test_unresolvable_command_has_no_candidates(self, session):
        assert query_lines(session, "zz ") == [NO_MORE_OPTIONS]

    def test_entry_tokens_from_config(self, session, run):
        run(session, "enable", "config network_manager")
        values = _values(resolve_candidates(session, "config "))
        assert set(values) == {"vlan", "qos", "dynrouter", "portsec", "mon", "autod"}

    def test_mode_hints_narrow_enable(self, session, run):
        run(session, "enable", "config network_manager", "config portsec")
        assert _values(resolve_candidates(session, "enable ")) == ["port_security_manager"]

    def test_interface_names_with_options(self, session, run):
        run(session, "enable", "config network_manager")
        resolution = resolve_candidates(session, "interface ")
        assert _values(resolution) == ["eth0", "eth1", "lo"]
        assert resolution.help == ["<interface-name>    - Specify a valid interface name"]

    def test_options_only_in_query_output(self, session):
        lines = query_lines(session, "ping ")
        assert lines == ["Possible completions:", "  <ip-address>    - Enter the ip-address"]
        assert complete_line(session, "ping ") == (5, [])

    def test_second_position_arguments(self, session, run):
        run(session, "enable")
        assert _values(resolve_candidates(session, "copy running-config ")) == ["startup-config"]

    def test_do_show_arguments(self, session, run):
        run(session, "enable", "config network_manager")
        assert "running-config" in _values(resolve_candidates(session, "do show "))


class TestPositionHints:
    def test_show_ip(self, session, run):
        run(session, "enable")
        assert _values(resolve_candidates(session, "show ip ")) == ["interface", "route"]

    def test_abbreviated_second_word(self, session, run):
        run(session, "enable")
        assert _values(resolve_candidates(session, "sh ip interface ")) == ["brief"]

    def test_clock_set_months(self, session, run):
        run(session, "enable")
        assert _values(resolve_candidates(session, "clock set 10:00:00 5 ")) == MONTHS
        assert _values(resolve_candidates(session, "clock set 10:00:00 5 Ju")) == ["June", "July"]

    def test_clock_set_help_only(self, session, run):
        run(session, "enable")
        lines = query_lines(session, "clock set ")
        assert lines == ["Possible completions:",
                         "  <hh:mm:ss>      - Enter the time in this specified format"]

    def test_mode_qualified_hint(self, session, run):
        run(session, "enable", "config network_manager", "config qos")
        assert _values(resolve_candidates(session, "interface eth0 ")) == ["cpq", "beq"]
        assert _values(resolve_candidates(session, "interface eth0 cpq ")) == ["true", "false"]

    def test_mode_qualified_hint_not_used_elsewhere(self, session, run):
        run(session, "enable", "config network_manager")
        assert query_lines(session, "interface eth0 ") == [NO_MORE_OPTIONS]

    def test_lookup_with_wildcard_words(self):
        hint = lookup_position_hint(Mode.VLAN, ["enable", "router", "r1", "id"])
        assert hint.help == ("<ID>         - Define the ID",)
        assert lookup_position_hint(Mode.VLAN, ["enable", "router", "r1"]).values == ("id",)

    def test_beyond_known_positions(self, session, run):
        run(session, "enable")
        assert query_lines(session, "ping 1.1.1.1 a b ") == [NO_MORE_OPTIONS]


class TestCompleteLine:
    def test_start_offset(self, session):
        start, matches = complete_line(session, "show cl")
        assert start == 5
        assert matches == [("clock", "clock")]

    def test_cursor_inside_line(self, session):
        start, matches = complete_line(session, "sh ver", cursor=2)
        assert start == 0
        assert matches == [("show", "show")]

    def test_after_space(self, session):
        start, matches = complete_line(session, "show ")
        assert start == 5
        assert ("arp", "arp") in matches


class TestCommandCompleter:
    def test_yields_prompt_toolkit_completions(self, session):
        completer = CommandCompleter(session)
        document = Document("show up", cursor_position=7)
        completions = list(completer.get_completions(document, CompleteEvent()))
        assert [c.text for c in completions] == ["uptime"]
        assert completions[0].start_position == -2
