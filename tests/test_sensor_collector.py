from collections import namedtuple

import pytest

from powerstat_core.collectors import SensorCollector
from powerstat_core.platform import hostinfo

shwtemp = namedtuple("shwtemp", ["label", "current", "high", "critical"])


def test_filters_implausible_readings():
    readings = [("a", 0), ("b", -5), ("c", 151), ("d", 0.1), ("e", 150.0), ("f", -1)]
    result = SensorCollector(lambda: readings).collect()
    assert [(r.label, r.value) for r in result] == [("d", 0.1), ("e", 150.0)]


def test_labels_cleaned_and_unit_fixed():
    result = SensorCollector(lambda: [("TC_AMBIENT", 31.5)]).collect()
    assert result[0].label == "AMBIENT"
    assert result[0].unit == "°C"


def test_facility_error_propagates_unchanged():
    err = PermissionError("denied")

    def facility():
        raise err

    with pytest.raises(PermissionError) as excinfo:
        SensorCollector(facility).collect()
    assert excinfo.value is err


def test_custom_bounds():
    collector = SensorCollector(lambda: [("x", 95.0), ("y", 85.0)], max_c=90.0)
    assert [r.label for r in collector.collect()] == ["y"]


def test_list_temperatures_flattens_psutil(monkeypatch):
    fake = {
        "coretemp": [shwtemp("Package id 0", 48.0, 80.0, 100.0), shwtemp("", 47.0, None, None)],
        "acpitz": [shwtemp("", 27.8, None, None)],
    }
    monkeypatch.setattr(hostinfo.psutil, "sensors_temperatures", lambda: fake, raising=False)
    assert hostinfo.list_temperatures() == [
        ("coretemp_Package id 0", 48.0),
        ("coretemp", 47.0),
        ("acpitz", 27.8),
    ]


def test_list_temperatures_unsupported(monkeypatch):
    monkeypatch.delattr(hostinfo.psutil, "sensors_temperatures", raising=False)
    with pytest.raises(NotImplementedError):
        hostinfo.list_temperatures()
