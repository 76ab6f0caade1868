"""Tests for abbreviation matching and the command registry."""

import pytest

from netshell_lib.errors import DuplicateCommandError, RegistryError
from netshell_lib.modes.loader import parse_profile_definition
from netshell_lib.registry.descriptor import CommandDescriptor, FunctionHandler
from netshell_lib.registry.matching import MatchKind, lookup_by_prefix, resolve_token
from netshell_lib.registry.registry import CommandRegistry
from netshell_lib.repl.commands import BUILTIN_COMMANDS, build_command_registry


def _descriptor(name):
    return CommandDescriptor(
        name=name, label=name, description=f"{name} command",
        handler=FunctionHandler(lambda session, args, clock: None),
    )


class TestLookupByPrefix:
    def test_unique(self):
        match = lookup_by_prefix("sh", ["show", "ssh", "shutdown"])
        assert match.kind is MatchKind.AMBIGUOUS
        match = lookup_by_prefix("sho", ["show", "ssh", "shutdown"])
        assert match.kind is MatchKind.UNIQUE
        assert match.name == "show"

    def test_none(self):
        match = lookup_by_prefix("xyz", ["show", "ssh"])
        assert match.kind is MatchKind.NONE
        assert match.matches == ()
        assert match.name is None

    def test_ambiguous_matches_are_sorted(self):
        match = lookup_by_prefix("c", ["copy", "clock", "config", "clear"])
        assert match.kind is MatchKind.AMBIGUOUS
        assert match.matches == ("clear", "clock", "config", "copy")
        assert match.name is None

    def test_prefix_only_never_exact(self):
        match = lookup_by_prefix("rip", ["rip", "rip_controller"])
        assert match.kind is MatchKind.AMBIGUOUS

    def test_empty_partial_matches_everything(self):
        match = lookup_by_prefix("", ["b", "a"])
        assert match.matches == ("a", "b")


class TestResolveToken:
    def test_exact_match_wins_over_longer_candidates(self):
        match = resolve_token("rip", ["rip", "rip_controller"])
        assert match.kind is MatchKind.UNIQUE
        assert match.name == "rip"

    def test_falls_back_to_prefix(self):
        assert resolve_token("rip_c", ["rip", "rip_controller"]).name == "rip_controller"


class TestCommandRegistry:
    def test_register_and_lookup(self):
        registry = CommandRegistry()
        registry.register("show", _descriptor("show"))
        assert "show" in registry
        assert registry.lookup_exact("show").name == "show"
        assert registry.lookup_exact("missing") is None
        assert len(registry) == 1

    def test_duplicate_name_rejected(self):
        registry = CommandRegistry()
        registry.register("show", _descriptor("show"))
        with pytest.raises(DuplicateCommandError):
            registry.register("show", _descriptor("show"))

    def test_frozen_registry_rejects_registration(self):
        registry = CommandRegistry()
        registry.freeze()
        assert registry.frozen
        with pytest.raises(RegistryError):
            registry.register("show", _descriptor("show"))

    def test_prefix_lookup_only_considers_candidates(self):
        registry = CommandRegistry()
        for name in ("show", "shutdown", "ssh"):
            registry.register(name, _descriptor(name))
        match = registry.lookup_by_prefix("sh", ["show", "ssh"])
        assert match.kind is MatchKind.UNIQUE
        assert match.name == "show"

    def test_names_sorted(self):
        registry = CommandRegistry()
        for name in ("ssh", "clear", "show"):
            registry.register(name, _descriptor(name))
        assert registry.names() == ["clear", "show", "ssh"]


class TestBuildCommandRegistry:
    def test_builtin_names_unique(self):
        names = [d.name for d in BUILTIN_COMMANDS]
        assert len(names) == len(set(names))

    def test_registry_is_frozen(self, profile):
        registry = build_command_registry(profile)
        assert registry.frozen
        for spec in profile.modes.values():
            assert all(name in registry for name in spec.commands)

    def test_direct_entry_commands_registered(self, defense_profile):
        registry = build_command_registry(defense_profile)
        for name in ("sdm", "bitd", "ptm", "rtxc", "infodist", "sysmon", "high_availability"):
            assert name in registry

    def test_unknown_command_in_mode_rejected(self):
        profile = parse_profile_definition({
            'name': 'broken',
            'root_mode': 'user',
            'modes': {
                'user': {'prompt_suffix': '>', 'commands': ['show', 'frobnicate']},
            },
        })
        with pytest.raises(RegistryError, match="frobnicate"):
            build_command_registry(profile)

    def test_tokened_entry_needs_existing_command(self):
        profile = parse_profile_definition({
            'name': 'broken',
            'root_mode': 'user',
            'modes': {
                'user': {'prompt_suffix': '>', 'commands': ['exit']},
                'lab': {
                    'prompt_suffix': '(lab)#',
                    'parent': 'user',
                    'entry': {'command': 'goto', 'token': 'lab'},
                },
            },
        })
        with pytest.raises(RegistryError, match="goto"):
            build_command_registry(profile)
