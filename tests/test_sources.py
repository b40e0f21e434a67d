import pytest

from aaxutils.sources import SourceType, source_string


@pytest.mark.parametrize(
    "stype, name",
    [
        (SourceType.SAWTOOTH, "sawtooth"),
        (SourceType.SQUARE, "square"),
        (SourceType.TRIANGLE, "triangle"),
        (SourceType.SINE, "sine"),
        (SourceType.CYCLOID, "cycloid"),
        (SourceType.ENVELOPE_FOLLOW, "envelope"),
        (SourceType.TIMED_TRANSITION, "timed"),
        (SourceType.RANDOMNESS, "randomness"),
        (SourceType.RANDOM_SELECT, "random"),
        (SourceType.PURE_SAWTOOTH, "pure-sawtooth"),
        (SourceType.PURE_SQUARE, "pure-square"),
        (SourceType.PURE_TRIANGLE, "pure-triangle"),
        (SourceType.PURE_SINE, "pure-sine"),
        (SourceType.PURE_CYCLOID, "pure-cycloid"),
    ],
)
def test_waveform_names(stype, name):
    assert source_string(stype) == name
    assert source_string(stype, freqfilter=True) == name


def test_inverse_prefix_has_no_separator():
    assert source_string(SourceType.SINE | SourceType.INVERSE) == "inverse-sine"


def test_nothing_gives_none():
    assert source_string(SourceType.WAVE_NONE) is None


@pytest.mark.parametrize(
    "stype, name",
    [
        (SourceType.CONSTANT, "true"),
        (SourceType.IMPULSE, "impulse"),
        (SourceType.WHITE_NOISE, "white-noise"),
        (SourceType.PINK_NOISE, "pink-noise"),
        (SourceType.BROWNIAN_NOISE, "brownian-noise"),
    ],
)
def test_steady_and_noise_names(stype, name):
    assert source_string(stype) == name


def test_constant_not_reported_for_frequency_filters():
    assert source_string(SourceType.CONSTANT, freqfilter=True) is None


def test_frequency_filter_keywords():
    stype = SourceType.ORDER_48DB | SourceType.BESSEL | SourceType.LFO_EXPONENTIAL
    assert source_string(stype, freqfilter=True).split("|") == [
        "48db", "bessel", "logarithmic"
    ]


def test_resonance_factor():
    assert source_string(SourceType.RESONANCE_FACTOR, freqfilter=True) == "Q"


def test_exponential_without_filter():
    parts = source_string(SourceType.SINE | SourceType.LFO_EXPONENTIAL).split("|")
    assert parts == ["sine", "exponential"]


def test_delay_order_and_stage():
    first = source_string(SourceType.SINE | SourceType.EFFECT_1ST_ORDER, delay=True)
    assert first.split("|") == ["sine", "1st-order"]
    staged = source_string(SourceType.TRIANGLE | SourceType.STAGE_3, delay=True)
    assert staged.split("|") == ["triangle", "3-stage"]


def test_order_ignored_without_delay_or_filter():
    assert source_string(SourceType.SINE | SourceType.STAGE_2) == "sine"


def test_separator_never_leads_or_trails():
    for member in SourceType:
        for freqfilter in (False, True):
            for delay in (False, True):
                text = source_string(member | SourceType.INVERSE, freqfilter, delay)
                assert text.startswith("inverse-")
                assert not text.endswith("|")
                assert "-|" not in text