"""Tests for the niri and kitty key combination parsers."""

from __future__ import annotations

import pytest

from fzf_keys._keys import parse_kitty_combo, parse_niri_combo
from fzf_keys.errors import DiscoveryError, UnknownModifierError
from fzf_keys.keybind import Modifier

# ---------------------------------------------------------------------------
# niri
# ---------------------------------------------------------------------------


class TestParseNiriCombo:
    def test_modifier_plus_key(self):
        mods, key = parse_niri_combo("Mod+Shift+T")
        assert mods == [Modifier.MOD, Modifier.SHIFT]
        assert key == "T"

    def test_no_modifiers(self):
        mods, key = parse_niri_combo("XF86AudioRaiseVolume")
        assert mods == []
        assert key == "XF86AudioRaiseVolume"

    def test_order_preserved(self):
        mods, key = parse_niri_combo("Mod+Shift+Ctrl+L")
        assert mods == [Modifier.MOD, Modifier.SHIFT, Modifier.CTRL]
        assert key == "L"

    @pytest.mark.parametrize(
        "token, modifier",
        [
            ("Super", Modifier.SUPER),
            ("Win", Modifier.SUPER),
            ("Alt", Modifier.ALT),
            ("Ctrl", Modifier.CTRL),
            ("Control", Modifier.CTRL),
            ("ISO_Level3_Shift", Modifier.ISO_LEVEL3_SHIFT),
            ("Mod5", Modifier.ISO_LEVEL3_SHIFT),
            ("ISO_Level5_Shift", Modifier.ISO_LEVEL5_SHIFT),
            ("Mod3", Modifier.ISO_LEVEL5_SHIFT),
        ],
    )
    def test_aliases(self, token, modifier):
        mods, key = parse_niri_combo(f"{token}+X")
        assert mods == [modifier]
        assert key == "X"

    def test_case_sensitive(self):
        with pytest.raises(UnknownModifierError) as excinfo:
            parse_niri_combo("ctrl+X")
        assert excinfo.value.token == "ctrl"

    def test_unknown_modifier(self):
        with pytest.raises(UnknownModifierError, match="Unknown modifier: Hyper"):
            parse_niri_combo("Hyper+X")

    def test_trailing_plus_is_an_empty_modifier(self):
        with pytest.raises(UnknownModifierError):
            parse_niri_combo("Mod++")

    def test_error_is_a_discovery_error(self):
        with pytest.raises(DiscoveryError):
            parse_niri_combo("Meta+X")


# ---------------------------------------------------------------------------
# kitty
# ---------------------------------------------------------------------------


class TestParseKittyCombo:
    def test_modifier_plus_key(self):
        mods, key = parse_kitty_combo("ctrl+shift+t")
        assert mods == [Modifier.CTRL, Modifier.SHIFT]
        assert key == "t"

    def test_no_modifiers(self):
        mods, key = parse_kitty_combo("f1")
        assert mods == []
        assert key == "f1"

    def test_multi_key_sequence(self):
        mods, key = parse_kitty_combo("ctrl+f>2")
        assert mods == [Modifier.CTRL]
        assert key == "f>2"

    def test_sequence_keeps_rest_verbatim(self):
        mods, key = parse_kitty_combo("ctrl+shift+p>ctrl+f>x")
        assert mods == [Modifier.CTRL, Modifier.SHIFT]
        assert key == "p>ctrl+f>x"

    def test_plus_key(self):
        mods, key = parse_kitty_combo("ctrl+shift++")
        assert mods == [Modifier.CTRL, Modifier.SHIFT]
        assert key == "+"

    def test_bare_plus_key(self):
        mods, key = parse_kitty_combo("++")
        assert mods == []
        assert key == "+"

    def test_kitty_mod_placeholder(self):
        mods, key = parse_kitty_combo("kitty_mod+c")
        assert mods == [Modifier.MOD]
        assert key == "c"

    def test_case_insensitive(self):
        mods, key = parse_kitty_combo("Ctrl+SHIFT+c")
        assert mods == [Modifier.CTRL, Modifier.SHIFT]
        assert key == "c"

    @pytest.mark.parametrize(
        "token, modifier",
        [
            ("control", Modifier.CTRL),
            ("opt", Modifier.ALT),
            ("option", Modifier.ALT),
            ("alt", Modifier.ALT),
            ("cmd", Modifier.SUPER),
            ("command", Modifier.SUPER),
            ("super", Modifier.SUPER),
        ],
    )
    def test_aliases(self, token, modifier):
        mods, _ = parse_kitty_combo(f"{token}+x")
        assert mods == [modifier]

    def test_unknown_modifier(self):
        with pytest.raises(UnknownModifierError, match="Unknown modifier: hyper"):
            parse_kitty_combo("hyper+x")

    def test_unknown_modifier_in_sequence(self):
        with pytest.raises(UnknownModifierError):
            parse_kitty_combo("meta+f>2")

    def test_unknown_modifier_before_plus_key(self):
        with pytest.raises(UnknownModifierError):
            parse_kitty_combo("meta++")
