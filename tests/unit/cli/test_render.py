"""Unit tests for terminal rendering helpers."""

import pytest

from lightwave.cli.render import format_time, format_value, parse_as
from lightwave.core.exceptions import DeserializationError
from lightwave.schemas import EffectDetailedInfo, EffectStatusResponse


class TestFormatTime:
    """Tests for runtime formatting."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "0.0s"),
            (12.34, "12.3s"),
            (59.9, "59.9s"),
            (60, "1m 0.0s"),
            (125, "2m 5.0s"),
            (3600, "1h 0m 0.0s"),
            (3723.5, "1h 2m 3.5s"),
        ],
    )
    def test_format_time(self, seconds, expected) -> None:
        assert format_time(seconds) == expected


class TestFormatValue:
    """Tests for type-colored value markup."""

    def test_scalars(self) -> None:
        assert format_value(None) == "[dim]null[/dim]"
        assert format_value(True) == "[green]true[/green]"
        assert format_value(False) == "[red]false[/red]"
        assert format_value(3) == "[cyan]3[/cyan]"
        assert format_value("hi") == '[yellow]"hi"[/yellow]'

    def test_containers(self) -> None:
        assert format_value([1, "a"]) == '[[cyan]1[/cyan], [yellow]"a"[/yellow]]'
        assert format_value({"k": None}) == "{[cyan]k[/cyan]: [dim]null[/dim]}"

    def test_markup_in_strings_is_escaped(self) -> None:
        assert format_value("[bold]x") == '[yellow]"\\[bold]x"[/yellow]'


class TestParseAs:
    """Tests for response view validation."""

    def test_type_field_alias(self) -> None:
        info = parse_as(
            EffectDetailedInfo,
            {
                "name": "rainbow",
                "description": "",
                "parameters": [{"name": "speed", "type": "float", "description": "", "default": 1}],
            },
        )
        assert info.parameters[0].param_type == "float"

    def test_unknown_fields_are_allowed(self) -> None:
        status = parse_as(EffectStatusResponse, {"running": False, "fps": 60})
        assert status.running is False

    def test_shape_mismatch_raises_deserialization_error(self) -> None:
        with pytest.raises(DeserializationError):
            parse_as(EffectStatusResponse, {"name": "rainbow"})
