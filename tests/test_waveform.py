import xml.etree.ElementTree as ET

from aaxutils.sources import SourceType
from aaxutils.waveform import Processing, WaveformScript


def _parse(script):
    return ET.fromstring(script.to_xml().encode())


def test_empty_before_processing():
    assert WaveformScript(440.0).to_xml() == ""


def test_first_waveform_sets_frequency():
    script = WaveformScript()
    assert script.process(440.0, SourceType.SINE, 1.0, Processing.ADD) is True
    root = _parse(script)
    assert root.tag == "aeonwave"
    sound = root.find("sound")
    assert float(sound.get("frequency")) == 440.0
    waves = sound.findall("waveform")
    assert len(waves) == 1
    assert waves[0].get("src") == "sine"
    assert waves[0].get("processing") == "add"
    assert float(waves[0].get("ratio")) == 1.0
    assert float(waves[0].get("pitch")) == 1.0
    assert script.base_frequency == 440.0


def test_script_starts_with_declaration():
    script = WaveformScript()
    script.process(220.0, SourceType.SQUARE, 1.0, Processing.OVERWRITE)
    assert script.to_xml().startswith('<?xml version="1.0"?>\n<aeonwave>')
    assert script.to_xml().endswith(" </sound>\n</aeonwave>")


def test_further_waveforms_are_appended_relative_to_base():
    script = WaveformScript()
    script.process(440.0, SourceType.SINE, 1.0, Processing.ADD)
    script.process(880.0, SourceType.TRIANGLE, 0.5, Processing.MIX)
    waves = _parse(script).find("sound").findall("waveform")
    assert [w.get("src") for w in waves] == ["sine", "triangle"]
    assert waves[1].get("processing") == Processing.MIX.label
    assert float(waves[1].get("ratio")) == 0.5
    assert float(waves[1].get("pitch")) == 2.0


def test_noise_uses_staticity():
    script = WaveformScript()
    script.process(0.0, SourceType.WHITE_NOISE, 1.0, Processing.ADD)
    wave = _parse(script).find("sound").find("waveform")
    assert wave.get("src") == "white-noise"
    assert float(wave.get("staticity")) == 0.0
    assert wave.get("pitch") is None


def test_ring_modulate_label():
    script = WaveformScript()
    script.process(440.0, SourceType.SINE, 1.0, Processing.ADD)
    script.process(110.0, SourceType.SAWTOOTH, 0.3, Processing.RINGMODULATE)
    waves = _parse(script).find("sound").findall("waveform")
    assert waves[-1].get("processing") == Processing.RINGMODULATE.label


def test_overwrite_starts_afresh():
    script = WaveformScript()
    script.process(440.0, SourceType.SINE, 1.0, Processing.ADD)
    script.process(660.0, SourceType.SQUARE, 0.4, Processing.ADD)
    script.process(330.0, SourceType.CYCLOID, 0.7, Processing.OVERWRITE)
    sound = _parse(script).find("sound")
    assert float(sound.get("frequency")) == 330.0
    assert [w.get("src") for w in sound.findall("waveform")] == ["cycloid"]


def test_zero_ratio_adds_nothing():
    script = WaveformScript()
    assert script.process(440.0, SourceType.SINE, 0.0, Processing.ADD) is True
    sound = _parse(script).find("sound")
    assert sound.findall("waveform") == []


def test_unknown_processing_adds_nothing():
    script = WaveformScript()
    script.process(440.0, SourceType.SINE, 1.0, Processing.ADD)
    before = script.to_xml()
    assert script.process(220.0, SourceType.SINE, 0.5, 99) is True
    assert script.to_xml() == before