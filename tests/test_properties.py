"""Test Maven property placeholder resolution."""

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from pomdeps.maven.properties import (
    UNCONSTRAINED_VERSION,
    has_unresolved_placeholder,
    resolve_placeholders,
    resolve_version,
)


class TestResolvePlaceholders:
    """Test the resolve_placeholders function."""

    def test_plain_value_unchanged(self):
        """Strings without placeholders are returned as-is."""
        assert resolve_placeholders("1.2.3", {"a": "b"}) == "1.2.3"

    def test_simple_substitution(self):
        assert resolve_placeholders("${spring.version}", {"spring.version": "2.7.0"}) == "2.7.0"

    def test_transitive_chain(self):
        """a -> ${b} -> ${c} -> 3.0 resolves fully."""
        properties = {"a": "${b}", "b": "${c}", "c": "3.0"}
        result = resolve_placeholders("${a}", properties)
        assert result == "3.0"
        assert not has_unresolved_placeholder(result)

    def test_embedded_placeholders(self):
        properties = {"major": "5", "minor": "3"}
        assert resolve_placeholders("${major}.${minor}.RELEASE", properties) == "5.3.RELEASE"

    def test_unknown_placeholder_kept(self):
        assert resolve_placeholders("${missing}", {}) == "${missing}"

    def test_partially_known(self):
        assert resolve_placeholders("${a}-${missing}", {"a": "1"}) == "1-${missing}"

    def test_direct_cycle_terminates(self):
        """a = ${b}, b = ${a} leaves the outer reference literal."""
        properties = {"a": "${b}", "b": "${a}"}
        assert resolve_placeholders("${a}", properties) == "${a}"

    def test_self_reference_terminates(self):
        assert resolve_placeholders("${a}", {"a": "${a}"}) == "${a}"

    def test_sibling_references_resolve_independently(self):
        """Using the same property twice in one string is not a cycle."""
        properties = {"v": "1.0", "w": "${v}-${v}"}
        assert resolve_placeholders("${w}/${v}", properties) == "1.0-1.0/1.0"


class TestResolveVersion:
    """Test the resolve_version function."""

    def test_empty_version_is_latest(self):
        assert resolve_version("", {}) == UNCONSTRAINED_VERSION
        assert resolve_version(None, {}) == "latest"

    def test_version_resolved(self):
        assert resolve_version("${v}", {"v": "4.1"}) == "4.1"

    def test_unresolved_version_kept(self):
        version = resolve_version("${unknown.version}", {})
        assert version == "${unknown.version}"
        assert has_unresolved_placeholder(version)
