"""Tests for validation, prompts and the running/startup configuration."""

import pytest

from netshell_lib.common.prompts import parse_confirmation
from netshell_lib.config.dataclasses import StaticRoute
from netshell_lib.config.running import (
    read_startup_config,
    render_running_config,
    save_running_config,
    write_startup_config,
)
from netshell_lib.config.validation import (
    ip_with_cidr,
    netmask_to_prefix,
    validate_hostname,
    validate_ipv4,
    validate_netmask,
)
from netshell_lib.errors import ArgumentFormatError, ResourceUnavailable


class TestValidation:
    def test_ipv4(self):
        assert validate_ipv4("192.168.1.1")
        assert not validate_ipv4("192.168.1.256")
        assert not validate_ipv4("router")

    def test_netmask(self):
        assert validate_netmask("255.255.255.0")
        assert validate_netmask("255.255.0.0")
        assert not validate_netmask("255.0.255.0")
        assert not validate_netmask("300.0.0.0")

    def test_cidr(self):
        assert netmask_to_prefix("255.255.240.0") == 20
        assert ip_with_cidr("10.0.0.1", "255.255.255.0") == "10.0.0.1/24"
        with pytest.raises(ValueError):
            ip_with_cidr("10.0.0.1", "255.0.255.0")

    @pytest.mark.parametrize("name,valid", [
        ("R1", True),
        ("core-sw_2", True),
        ("1router", False),
        ("bad name", False),
        ("", False),
    ])
    def test_hostname(self, name, valid):
        assert validate_hostname(name) is valid


class TestConfirmation:
    @pytest.mark.parametrize("answer,expected", [
        ("yes", True), ("Y", True), ("", True),
        ("no", False), ("N", False), (None, False),
    ])
    def test_answers(self, answer, expected):
        assert parse_confirmation(answer) is expected

    def test_invalid_answer(self):
        with pytest.raises(ArgumentFormatError):
            parse_confirmation("maybe")


class TestRunningConfig:
    def test_defaults(self, session):
        text = render_running_config(session)
        assert "version 15.1" in text
        assert "hostname Network" in text
        assert "no service password-encryption" in text
        assert "interface FastEthernet0/1" in text
        assert " no ip address" in text
        assert " no shutdown" in text
        assert text.rstrip().endswith("end")

    def test_reflects_session(self, session):
        session.config.hostname = "R1"
        session.config.password_encryption = True
        session.config.enable_password = "cisco"
        session.credentials.set_enable_password("cisco")
        session.credentials.set_enable_secret("class")
        session.selected_interface = "eth0"
        session.state.set_address("eth0", "10.0.0.1", "255.255.255.0")
        session.state.set_link("eth0", False)
        session.state.add_route(StaticRoute("10.1.0.0", "255.255.0.0", "eth0", "10.0.0.254"))
        session.config.set_feature("ospf", True)

        text = render_running_config(session)
        assert "hostname R1" in text
        assert "\nservice password-encryption" in text
        assert f"enable password 5 {session.credentials.enable_password_digest()}" in text
        assert f"enable secret 5 {session.credentials.enable_secret_digest()}" in text
        assert "interface eth0" in text
        assert " ip address 10.0.0.1 255.255.255.0" in text
        assert " shutdown" in text
        assert "ip route 10.1.0.0 255.255.0.0 eth0 10.0.0.254" in text
        assert "router ospf 1" in text
        assert "feature ospf" in text

    def test_plain_password_without_encryption(self, session):
        session.config.enable_password = "cisco"
        session.credentials.set_enable_password("cisco")
        assert "enable password cisco" in render_running_config(session)

    def test_settings_listed(self, session):
        session.config.settings["vlan.id"] = "10"
        assert " vlan.id 10" in render_running_config(session)


class TestStartupConfig:
    def test_missing(self, workdir):
        assert read_startup_config(workdir / "startup-config.conf") is None

    def test_write_and_read(self, workdir):
        path = workdir / "saved.conf"
        write_startup_config("hostname R1\n", path)
        assert read_startup_config(path) == "hostname R1\n"

    def test_write_failure(self, workdir):
        with pytest.raises(ResourceUnavailable):
            write_startup_config("x", workdir / "missing" / "dir" / "file.conf")

    def test_save_records_time(self, session, workdir):
        path = save_running_config(session, workdir / "startup-config.conf")
        assert "hostname Network" in path.read_text()
        assert session.config.last_written is not None
