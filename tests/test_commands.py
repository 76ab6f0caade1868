"""Tests for command handlers, driven through the dispatcher."""

import pytest

from netshell_lib.errors import (
    ArgumentFormatError,
    ExternalCommandFailure,
    ModeViolation,
    ResourceUnavailable,
)
from netshell_lib.modes.graph import Mode
from netshell_lib.repl.commands import system


@pytest.fixture
def config_session(session, run):
    run(session, "enable", "config network_manager")
    return session


@pytest.fixture
def interface_session(config_session, run):
    run(config_session, "interface eth0")
    return config_session


class TestHostname:
    def test_changes_prompt(self, config_session, run):
        assert run(config_session, "hostname R1").ok
        assert config_session.prompt == "R1(config)#"
        run(config_session, "exit")
        assert config_session.prompt == "R1#"

    def test_invalid_hostname(self, config_session, run):
        result = run(config_session, "hostname 1bad")
        assert isinstance(result.error, ArgumentFormatError)
        assert config_session.prompt == "Network(config)#"


class TestWriteAndCopy:
    def test_write_memory(self, session, run, workdir, capsys):
        result = run(session, "wr mem")
        assert result.ok
        assert result.args == ("memory",)
        assert (workdir / "startup-config.conf").exists()
        out = capsys.readouterr().out
        assert "Building configuration..." in out
        assert "[OK]" in out

    def test_show_startup_config(self, session, run, capsys):
        run(session, "enable")
        run(session, "show startup-config")
        assert "startup-config is not present" in capsys.readouterr().out
        run(session, "write memory", "show startup-config")
        assert "hostname Network" in capsys.readouterr().out

    def test_copy_to_file(self, session, run, workdir):
        run(session, "enable")
        assert run(session, "copy running-config backup.conf").ok
        assert "hostname Network" in (workdir / "backup.conf").read_text()

    def test_do_copy_from_config(self, config_session, run, workdir):
        assert run(config_session, "do copy running-config startup-config").ok
        assert (workdir / "startup-config.conf").exists()

    def test_copy_needs_destination(self, config_session, run):
        result = run(config_session, "do copy running-config")
        assert isinstance(result.error, ArgumentFormatError)


class TestClock:
    def test_clock_set(self, session, run, clock):
        run(session, "enable")
        assert run(session, "clock set 09:30:00 14 Feb 2010").ok
        assert clock.now().year == 2010

    def test_clock_set_without_clock(self, session):
        from netshell_lib.repl.dispatcher import handle_command

        session.profile.graph.force(Mode.PRIVILEGED, session)
        result = handle_command("clock set 09:30:00 14 Feb 2010", session, None)
        assert isinstance(result.error, ResourceUnavailable)

    def test_show_clock(self, session, run, capsys):
        run(session, "show clock")
        assert capsys.readouterr().out.startswith("*")

    def test_show_version(self, session, run, capsys):
        run(session, "show version")
        out = capsys.readouterr().out
        assert "Version 15.1" in out
        assert "PNF uptime is" in out


class TestDebug:
    def test_debug_all_confirmed(self, session, run, monkeypatch):
        monkeypatch.setattr(system, "prompt_answer", lambda question: "yes")
        run(session, "enable")
        assert run(session, "debug all").ok
        assert session.config.feature_enabled("debug_all")
        assert run(session, "undebug all").ok
        assert not session.config.feature_enabled("debug_all")

    def test_debug_all_declined(self, session, run, monkeypatch):
        monkeypatch.setattr(system, "prompt_answer", lambda question: "")
        run(session, "enable")
        assert run(session, "debug all").ok
        assert not session.config.feature_enabled("debug_all")

    def test_do_debug_from_leaf_mode(self, config_session, run, monkeypatch):
        monkeypatch.setattr(system, "prompt_answer", lambda question: "y")
        run(config_session, "config mon")
        assert run(config_session, "do debug all").ok
        assert config_session.config.feature_enabled("debug_all")


class TestReload:
    def test_reload_confirmed(self, session, run, processes, monkeypatch):
        monkeypatch.setattr(system, "confirm", lambda question: True)
        assert run(session, "reload").ok
        assert processes.calls == [("sudo", "reboot")]

    def test_poweroff_declined(self, session, run, processes, monkeypatch):
        monkeypatch.setattr(system, "confirm", lambda question: False)
        assert run(session, "poweroff").ok
        assert processes.calls == []


class TestIpAddress:
    def test_assign(self, interface_session, run, processes):
        result = run(interface_session, "ip address 10.0.0.1 255.255.255.0")
        assert result.ok
        assert processes.calls[-1] == ("sudo", "ifconfig", "eth0", "10.0.0.1", "netmask", "255.255.255.0", "up")
        assert interface_session.state.address_of("eth0") == ("10.0.0.1", "255.255.255.0")

    def test_invalid_netmask_changes_nothing(self, interface_session, run, processes):
        result = run(interface_session, "ip address 10.0.0.1 255.0.255.0")
        assert isinstance(result.error, ArgumentFormatError)
        assert processes.calls == []
        assert interface_session.state.address_of("eth0") is None

    def test_failed_command_changes_nothing(self, interface_session, run, processes):
        processes.fail_on.add("ifconfig")
        result = run(interface_session, "ip address 10.0.0.1 255.255.255.0")
        assert isinstance(result.error, ExternalCommandFailure)
        assert interface_session.state.address_of("eth0") is None

    def test_only_in_interface_mode(self, config_session, run):
        result = run(config_session, "ip address 10.0.0.1 255.255.255.0")
        assert isinstance(result.error, ModeViolation)

    def test_remove(self, interface_session, run, processes):
        run(interface_session, "ip address 10.0.0.1 255.255.255.0")
        assert run(interface_session, "no ip address 10.0.0.1 255.255.255.0").ok
        assert processes.calls[-1] == ("sudo", "ip", "addr", "del", "10.0.0.1/24", "dev", "eth0")
        assert interface_session.state.address_of("eth0") is None


class TestIpRoute:
    def test_add_and_remove(self, config_session, run, processes):
        assert run(config_session, "ip route 10.1.0.0 255.255.0.0 eth1 10.0.0.254").ok
        assert processes.calls[-1] == (
            "sudo", "ip", "route", "add", "10.1.0.0/16", "via", "10.0.0.254", "dev", "eth1",
        )
        assert len(config_session.state.routes()) == 1

        assert run(config_session, "no ip route 10.1.0.0 255.255.0.0 eth1 10.0.0.254").ok
        assert config_session.state.routes() == []

    def test_unknown_exit_interface(self, config_session, run, processes):
        result = run(config_session, "ip route 10.1.0.0 255.255.0.0 wlan9 10.0.0.254")
        assert isinstance(result.error, ArgumentFormatError)
        assert processes.calls == []

    def test_wrong_argument_count(self, config_session, run):
        result = run(config_session, "ip route 10.1.0.0 255.255.0.0")
        assert isinstance(result.error, ArgumentFormatError)


class TestShutdown:
    def test_shutdown_and_no_shutdown(self, interface_session, run, processes):
        assert run(interface_session, "shutdown").ok
        assert not interface_session.state.link_up("eth0")
        assert run(interface_session, "no shutdown").ok
        assert interface_session.state.link_up("eth0")
        assert ("sudo", "netplan", "apply") in processes.calls

    def test_netplan_failure_only_warns(self, interface_session, run, processes, capsys):
        processes.fail_on.add("netplan")
        assert run(interface_session, "no shutdown").ok
        assert "netplan apply failed" in capsys.readouterr().out


class TestNetworkTools:
    def test_ping(self, session, run, processes):
        assert run(session, "ping 8.8.8.8").ok
        assert processes.calls == [("ping", "-c", "4", "-s", "32", "8.8.8.8")]

    def test_ping_failure_reported(self, session, run, processes):
        processes.fail_on.add("ping")
        assert isinstance(run(session, "ping 8.8.8.8").error, ExternalCommandFailure)

    def test_ssh_login(self, session, run, processes):
        run(session, "enable")
        assert run(session, "ssh -l admin@192.168.1.1").ok
        assert processes.calls == [("ssh", "admin@192.168.1.1")]

    def test_ssh_bad_target(self, session, run, processes):
        run(session, "enable")
        assert isinstance(run(session, "ssh -l admin").error, ArgumentFormatError)
        assert processes.calls == []

    def test_ssh_version(self, session, run):
        run(session, "enable")
        assert run(session, "ssh -v 2").ok
        assert session.config.settings["ssh.version"] == "2"

    def test_dhcp_enable_continues_after_failure(self, session, run, processes):
        processes.fail_on.add("dhclient")
        assert run(session, "dhcp_enable").ok
        assert processes.calls[-1] == ("sudo", "systemctl", "restart", "NetworkManager")


class TestShow:
    def test_show_ip_route_lists_static_routes(self, config_session, run, capsys):
        run(config_session, "ip route 10.1.0.0 255.255.0.0 eth1 10.0.0.254", "exit")
        capsys.readouterr()
        assert run(config_session, "show ip route").ok
        assert "10.1.0.0 255.255.0.0 via 10.0.0.254 eth1" in capsys.readouterr().out

    def test_show_controllers_tolerates_missing_tools(self, session, run, processes):
        processes.fail_on.add("lsusb")
        assert run(session, "show controllers").ok
        assert ("lspci",) in processes.calls

    def test_show_history(self, session, run, capsys):
        session.history.extend(["enable", "show clock"])
        run(session, "show history")
        out = capsys.readouterr().out
        assert "1  enable" in out
        assert "2  show clock" in out

    def test_show_outside_exec_modes(self, config_session, run):
        assert isinstance(run(config_session, "show version").error, ModeViolation)

    def test_do_show_from_leaf_mode(self, config_session, run, capsys):
        run(config_session, "config vlan")
        capsys.readouterr()
        assert run(config_session, "do show running-config").ok
        assert "hostname Network" in capsys.readouterr().out

    def test_help_lists_mode_commands(self, session, run, capsys):
        run(session, "help")
        out = capsys.readouterr().out
        assert "User EXEC mode" in out
        assert "enable" in out


class TestFeatureManagers:
    def test_enable_manager_in_its_mode(self, config_session, run):
        run(config_session, "config vlan")
        assert run(config_session, "enable vlan_manager").ok
        assert config_session.config.feature_enabled("vlan_manager")
        assert run(config_session, "disable vlan_manager").ok
        assert not config_session.config.feature_enabled("vlan_manager")

    def test_enable_manager_outside_its_mode(self, config_session, run):
        run(config_session, "config qos")
        result = run(config_session, "enable vlan_manager")
        assert isinstance(result.error, ModeViolation)
        assert not config_session.config.feature_enabled("vlan_manager")

    def test_exact_subcommand_beats_longer_one(self, config_session, run):
        run(config_session, "config dynrouter")
        result = run(config_session, "enable rip")
        assert result.ok
        assert result.args == ("rip",)
        assert config_session.config.feature_enabled("rip")
        assert not config_session.config.feature_enabled("rip_controller")

    def test_enable_manager_with_id(self, config_session, run):
        run(config_session, "config qos")
        assert run(config_session, "enable qos_manager id 7").ok
        assert config_session.config.settings["qos_manager.id"] == "7"
        assert isinstance(run(config_session, "enable qos_manager id x").error, ArgumentFormatError)

    def test_config_ospf_in_dynrouter(self, config_session, run):
        run(config_session, "config dynrouter")
        assert run(config_session, "config ospf").ok
        assert config_session.config.feature_enabled("ospf_config")
        assert config_session.mode == Mode.DYNROUTER

    def test_vlan_settings(self, config_session, run):
        run(config_session, "config vlan")
        assert run(config_session, "vlan id 20").ok
        assert config_session.config.settings["vlan.id"] == "20"
        assert isinstance(run(config_session, "vlan id 5000").error, ArgumentFormatError)
        assert run(config_session, "bridge_name br0").ok
        assert run(config_session, "add bridge br0 interface eth0").ok
        assert config_session.config.settings["vlan.bridge.br0.interface"] == "eth0"

    def test_qos_interface_queue(self, config_session, run):
        run(config_session, "config qos")
        assert run(config_session, "interface eth0 cpq true").ok
        assert config_session.config.settings["qos.eth0.cpq"] == "true"
        assert isinstance(run(config_session, "interface eth0 cpq maybe").error, ArgumentFormatError)

    def test_autod_interface(self, config_session, run):
        run(config_session, "config autod")
        assert run(config_session, "interface eth1 disable").ok
        assert config_session.config.settings["autod.eth1"] == "disable"
        assert config_session.mode == Mode.AUTOD

    def test_network_field_validation(self, config_session, run):
        run(config_session, "config dynrouter")
        assert run(config_session, "network eth0 area 5").ok
        assert isinstance(run(config_session, "network eth0 netmask 255.0.255.0").error,
                          ArgumentFormatError)

    def test_holdtime(self, config_session, run):
        run(config_session, "config autod")
        assert run(config_session, "holdtime default").ok
        assert isinstance(run(config_session, "holdtime soon").error, ArgumentFormatError)

    def test_priority(self, config_session, run):
        run(config_session, "config qos")
        assert run(config_session, "priority level 3 interface eth0").ok
        assert config_session.config.settings["qos.eth0.priority"] == "3"


class TestDefensePlatform:
    def test_direct_mode_entry(self, defense_session, run):
        run(defense_session, "enable", "config network_manager")
        assert run(defense_session, "sdm").ok
        assert defense_session.prompt == "Network(config-sdm)#"
        assert run(defense_session, "exit").ok
        assert defense_session.mode == Mode.CONFIG

    def test_entry_command_takes_no_arguments(self, defense_session, run):
        run(defense_session, "enable", "config network_manager")
        assert isinstance(run(defense_session, "bitd now").error, ArgumentFormatError)
        assert defense_session.mode == Mode.CONFIG
