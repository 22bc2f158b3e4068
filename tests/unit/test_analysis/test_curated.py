import pytest

from fxbands.analysis.bands import generate_bands
from fxbands.analysis.curated import BandKind, CuratedBandSet, resolve_band_kind
from fxbands.analysis.models import RangeKind
from fxbands.analysis.statistics import compute_statistics
from fxbands.utils.errors import ConfigurationError, ValidationError


@pytest.fixture
def band_set(curated_levels):
    return CuratedBandSet.from_records(curated_levels, name="Test", pair="USD/THB")


def test_supplied_order_is_kept(curated_levels):
    band_set = CuratedBandSet.from_records(list(reversed(curated_levels)))
    assert band_set.kinds == (
        BandKind.RICH, BandKind.NEUTRAL, BandKind.OPPORTUNE, BandKind.DEEP, BandKind.EXTREME,
    )
    assert [b.level for b in band_set] == ["USD-RICH", "NEUTRAL", "OPPORTUNE", "DEEP", "EXTREME"]
    assert len(band_set) == 5
    # USD-RICH is listed first, so it wins the shared 34.0 boundary
    assert band_set.classify(34.0).level == "USD-RICH"


def test_generated_band_records_keep_generator_order(series_factory):
    stats = compute_statistics(series_factory(range(1, 11)))
    band_set = CuratedBandSet.from_records([b.to_dict() for b in generate_bands(stats)])
    assert band_set.kinds == (
        BandKind.EXTREME, BandKind.DEEP, BandKind.NEUTRAL, BandKind.ELEVATED, BandKind.RICH,
    )
    assert band_set.classify(stats.p75).level == "NEUTRAL"
    assert band_set.classify(stats.p10).level == "EXTREME_LOW"
    assert band_set.classify(stats.p90).level == "HIGH"


def test_zero_floor_becomes_open_below(band_set):
    extreme = band_set.bands[0]
    assert extreme.range_min is None
    assert extreme.range_max == 29.5
    assert extreme.range_kind is RangeKind.OPEN_BELOW
    assert band_set.bands[-1].range_kind is RangeKind.OPEN_ABOVE


@pytest.mark.parametrize(
    "rate,expected",
    [
        (10.0, "EXTREME"),
        (29.5, "EXTREME"),
        (30.0, "DEEP"),
        (31.5, "OPPORTUNE"),
        (33.0, "NEUTRAL"),
        (34.0, "NEUTRAL"),  # NEUTRAL is checked before USD-RICH
        (34.5, "USD-RICH"),
        (50.0, "USD-RICH"),
    ],
)
def test_classify(band_set, rate, expected):
    assert band_set.classify(rate).level == expected


@pytest.mark.parametrize("rate", [29.55, 31.25, 32.05])
def test_gaps_between_bands_are_unclassified(band_set, rate):
    assert band_set.classify(rate) is None


def test_kind_of(band_set):
    rich = band_set.classify(40.0)
    assert band_set.kind_of(rich) is BandKind.RICH


def test_guidance_fields_carried(band_set):
    extreme = band_set.bands[0]
    assert extreme.action_brief == "convert_max_thb_to_usd_now"
    assert extreme.example_action == "exchange_60_80k_thb"
    assert band_set.bands[1].example_action is None
    assert band_set.bands[3].probability == 0.45


@pytest.mark.parametrize(
    "identifier,kind",
    [
        ("EXTREME", BandKind.EXTREME),
        ("usd-rich", BandKind.RICH),
        ("RICH", BandKind.RICH),
        ("EXTREME_LOW", BandKind.EXTREME),
        ("LOW", BandKind.DEEP),
        (" neutral ", BandKind.NEUTRAL),
        ("HIGH", BandKind.ELEVATED),
        ("EXTREME_HIGH", BandKind.RICH),
    ],
)
def test_resolve_band_kind(identifier, kind):
    assert resolve_band_kind(identifier) is kind


@pytest.mark.parametrize("identifier", ["", None, "CHEAP", "EUR-RICH"])
def test_resolve_unknown_identifier(identifier):
    with pytest.raises(ValidationError):
        resolve_band_kind(identifier)


def test_duplicate_kinds_rejected(curated_levels):
    curated_levels.append(dict(curated_levels[-1], level="RICH"))
    with pytest.raises(ValidationError, match="both map to RICH"):
        CuratedBandSet.from_records(curated_levels)


def test_unknown_level_rejected(curated_levels):
    curated_levels[0] = dict(curated_levels[0], level="BARGAIN")
    with pytest.raises(ValidationError):
        CuratedBandSet.from_records(curated_levels)


@pytest.mark.parametrize(
    "patch",
    [
        {"probability": 1.5},
        {"probability": None},
        {"range": {"min": 31.0, "max": 30.0}},
        {"range": {"min": "abc", "max": 30.0}},
        {"action_brief": ""},
        {"reason": None},
        {"example_action": 42},
        {"example_action": "  "},
    ],
)
def test_invalid_band_fields_rejected(curated_levels, patch):
    curated_levels[1] = dict(curated_levels[1], **patch)
    with pytest.raises(ValidationError):
        CuratedBandSet.from_records(curated_levels)


def test_empty_band_set_rejected():
    with pytest.raises(ValidationError):
        CuratedBandSet.from_records([])


def test_from_mapping_requires_levels():
    with pytest.raises(ConfigurationError):
        CuratedBandSet.from_mapping({"name": "no levels"})


def test_from_yaml(temp_config_file):
    band_set = CuratedBandSet.from_yaml(temp_config_file)
    assert band_set.name == "Test USD/THB"
    assert band_set.pair == "USD/THB"
    assert band_set.classify(30.0).level == "DEEP"


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(ConfigurationError):
        CuratedBandSet.from_yaml(str(tmp_path / "absent.yaml"))


def test_from_yaml_missing_section(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("app:\n  name: x\nanalysis: {}\n")
    with pytest.raises(ConfigurationError, match="bands.curated"):
        CuratedBandSet.from_yaml(str(path))
