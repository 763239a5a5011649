"""
Tests for MCP tools.

Tests the MCP tool implementations for pitch conversion, formulas and
inversions, intervals, and fretboard fingerings.
"""

import json

import pytest

from chuk_mcp_theory.stores import FormulaStore, TuningStore
from chuk_mcp_theory.tools import (
    register_formula_tools,
    register_fretboard_tools,
    register_interval_tools,
    register_pitch_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


class TestPitchTools:
    """Tests for pitch tools."""

    @pytest.mark.asyncio
    async def test_pitch_from_name(self):
        """Resolve A4."""
        tools = register_pitch_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_pitch_from_name"](name="A", octave=4))
        assert data["status"] == "success"
        assert data["pitch"]["midi"] == 69
        assert data["pitch"]["frequency"] == 440.0
        assert data["pitch"]["label"] == "A4"

    @pytest.mark.asyncio
    async def test_pitch_from_midi_out_of_range(self):
        """Out-of-range MIDI numbers report their error kind."""
        tools = register_pitch_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_pitch_from_midi"](midi=200))
        assert data["status"] == "error"
        assert data["kind"] == "out_of_range"

    @pytest.mark.asyncio
    async def test_pitch_from_frequency(self):
        """Nearest pitch plus cents offset."""
        tools = register_pitch_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_pitch_from_frequency"](frequency=440.0))
        assert data["pitch"]["name"] == "A"
        assert data["cents"] == 0.0

        data = json.loads(await tools["theory_pitch_from_frequency"](frequency=-1.0))
        assert data["kind"] == "invalid_frequency"

    def test_registers_with_server(self):
        """Tools are registered on the server."""
        mcp = MockMCPServer("test")
        register_pitch_tools(mcp)
        assert "theory_pitch_from_name" in mcp.tools


class TestFormulaTools:
    """Tests for formula and inversion tools."""

    @pytest.mark.asyncio
    async def test_list_formulas(self, formula_store: FormulaStore):
        """List chords and scales."""
        tools = register_formula_tools(MockMCPServer("test"), formula_store)
        data = json.loads(await tools["theory_list_formulas"]())
        assert "major" in data["chords"]
        assert "blues" in data["scales"]

    @pytest.mark.asyncio
    async def test_expand_chord(self, formula_store: FormulaStore):
        """Expand C4 major."""
        tools = register_formula_tools(MockMCPServer("test"), formula_store)
        data = json.loads(await tools["theory_expand_chord"](root="C", octave=4, chord="major"))
        assert data["status"] == "success"
        assert data["chord"]["midi"] == [60, 64, 67]
        assert data["chord"]["notes"] == ["C4", "E4", "G4"]
        assert data["chord"]["kind"] == "chord"

    @pytest.mark.asyncio
    async def test_expand_unknown_chord(self, formula_store: FormulaStore):
        """Unknown chords report not_found."""
        tools = register_formula_tools(MockMCPServer("test"), formula_store)
        data = json.loads(await tools["theory_expand_chord"](root="C", octave=4, chord="nope"))
        assert data["status"] == "error"
        assert data["kind"] == "not_found"

    @pytest.mark.asyncio
    async def test_expand_scale(self, formula_store: FormulaStore):
        """Expand a scale."""
        tools = register_formula_tools(MockMCPServer("test"), formula_store)
        data = json.loads(
            await tools["theory_expand_scale"](root="C", octave=4, scale="major_pentatonic")
        )
        assert data["scale"]["midi"] == [60, 62, 64, 67, 69]

    @pytest.mark.asyncio
    async def test_inversion_tools(self, formula_store: FormulaStore):
        """Query and apply inversions."""
        tools = register_formula_tools(MockMCPServer("test"), formula_store)
        data = json.loads(await tools["theory_chord_inversion"](notes=[64, 67, 60]))
        assert data["inversion"] == 1
        assert data["label"] == "1st inversion"

        data = json.loads(await tools["theory_invert_chord"](notes=[60, 64, 67], inversion=2))
        assert data["midi"] == [67, 60, 64]

        data = json.loads(await tools["theory_chord_inversion"](notes=[]))
        assert data["kind"] == "invalid_argument"


class TestIntervalTools:
    """Tests for interval tools."""

    @pytest.mark.asyncio
    async def test_interval_between(self):
        """Name the interval between two pitches."""
        tools = register_interval_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_interval_between"](from_note="C4", to_note="D4"))
        assert data["interval"]["semitones"] == 2
        assert data["interval"]["name"] == "Major 2nd"

    @pytest.mark.asyncio
    async def test_interval_name(self):
        """Name a negative distance."""
        tools = register_interval_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_interval_name"](semitones=-14))
        assert data["octaves"] == -2
        assert data["name"] == "Minor 7th"

        data = json.loads(await tools["theory_interval_name"](semitones=300))
        assert data["kind"] == "invalid_interval"

    @pytest.mark.asyncio
    async def test_interval_unknown_style(self):
        """Unknown styles are reported as invalid_argument, not as a crash."""
        tools = register_interval_tools(MockMCPServer("test"))
        data = json.loads(await tools["theory_interval_name"](semitones=2, style="bogus"))
        assert data["status"] == "error"
        assert data["kind"] == "invalid_argument"
        assert "quality" in data["message"]

        data = json.loads(
            await tools["theory_interval_between"](from_note="C4", to_note="D4", style="bogus")
        )
        assert data["kind"] == "invalid_argument"

    @pytest.mark.asyncio
    async def test_note_at_interval(self):
        """Add a named interval to a root."""
        tools = register_interval_tools(MockMCPServer("test"))
        data = json.loads(
            await tools["theory_note_at_interval"](root=60, interval="Perfect 5th")
        )
        assert data["midi"] == 67


class TestFretboardTools:
    """Tests for fretboard tools."""

    @pytest.mark.asyncio
    async def test_list_tunings(self, formula_store: FormulaStore, tuning_store: TuningStore):
        """List tunings with their open strings."""
        tools = register_fretboard_tools(MockMCPServer("test"), formula_store, tuning_store)
        data = json.loads(await tools["theory_list_tunings"]())
        entries = {t["key"]: t for t in data["tunings"]}
        assert entries["guitar_standard"]["name"] == "Guitar standard"
        assert entries["bass_standard"]["strings"] == ["E1", "A1", "D2", "G2"]

    @pytest.mark.asyncio
    async def test_listed_keys_feed_fingering(
        self, formula_store: FormulaStore, tuning_store: TuningStore
    ):
        """Every key from theory_list_tunings is accepted by theory_fingering."""
        tools = register_fretboard_tools(MockMCPServer("test"), formula_store, tuning_store)
        listed = json.loads(await tools["theory_list_tunings"]())["tunings"]
        assert listed
        for entry in listed:
            data = json.loads(
                await tools["theory_fingering"](
                    tuning=entry["key"], root="A", octave=2, formula="minor"
                )
            )
            assert data["status"] == "success", entry["key"]
            assert data["fingering"]["tuning"] == entry["name"]

    @pytest.mark.asyncio
    async def test_fingering(self, formula_store: FormulaStore, tuning_store: TuningStore):
        """Fingering for A2 minor on guitar."""
        tools = register_fretboard_tools(MockMCPServer("test"), formula_store, tuning_store)
        data = json.loads(
            await tools["theory_fingering"](
                tuning="guitar_standard", root="A", octave=2, formula="minor", max_frets=13
            )
        )
        assert data["status"] == "success"
        assert data["midi"] == [45, 48, 52]
        first = data["fingering"]["positions"][0]
        assert first == {"string": 1, "fret": 5, "mnn": 45, "note": "A2", "degree": 0}
        assert len(data["diagram"].splitlines()) == 6

    @pytest.mark.asyncio
    async def test_fingering_unknown_tuning(
        self, formula_store: FormulaStore, tuning_store: TuningStore
    ):
        """Unknown tunings report not_found."""
        tools = register_fretboard_tools(MockMCPServer("test"), formula_store, tuning_store)
        data = json.loads(
            await tools["theory_fingering"](
                tuning="banjo_42", root="A", octave=2, formula="minor"
            )
        )
        assert data["kind"] == "not_found"
