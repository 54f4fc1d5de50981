from pathlib import Path

import pytest

from devicenames.core.exceptions import OutputWriteError
from devicenames.models.device import Device
from devicenames.output.emitter import JsonEmitter, dumps, write_json

from conftest import read_json


def _device(manufacturer="Acme", market_name="Foo", codename="foo", model="F1"):
    return Device(manufacturer=manufacturer, market_name=market_name, codename=codename, model=model)


def test_devices_json_round_trips(tmp_path):
    devices = [
        _device(),
        _device(manufacturer="Zeta", market_name="Zed é", codename="Zed", model="Z1"),
        _device(manufacturer="", codename=""),
    ]
    JsonEmitter(tmp_path).generate(devices, [])

    loaded = [Device(**row) for row in read_json(tmp_path / "devices.json")]
    assert loaded == devices


def test_keys_are_serialized_in_field_order():
    assert dumps([_device().to_json()]) == (
        "[\n"
        "  {\n"
        '    "manufacturer": "Acme",\n'
        '    "market_name": "Foo",\n'
        '    "codename": "foo",\n'
        '    "model": "F1"\n'
        "  }\n"
        "]"
    )


def test_layout_and_summary(tmp_path):
    devices = [
        _device(manufacturer="Sony Mobile-Com.", codename="Foo", model="A"),
        _device(manufacturer="Acme", codename="foo", model="B"),
        _device(manufacturer="Acme", codename="", model="C", market_name="Pixel 2"),
    ]
    summary = JsonEmitter(tmp_path / "out").generate(devices, ["pixel 2"], dropped=4)

    root = tmp_path / "out"
    assert sorted(p.name for p in (root / "devices").iterdir()) == ["foo.json"]
    assert sorted(p.name for p in (root / "manufacturers").iterdir()) == ["ACME.json", "SONY_MOBILECOM.json"]
    assert [d["model"] for d in read_json(root / "devices" / "foo.json")] == ["A", "B"]
    assert [d["model"] for d in read_json(root / "popular-devices.json")] == ["C"]

    acme = read_json(root / "manufacturers" / "ACME.json")
    assert acme["manufacturer"] == "Acme"
    assert [d["model"] for d in acme["devices"]] == ["B", "C"]
    assert {d["manufacturer"] for d in acme["devices"]} == {""}

    assert summary.devices == 3
    assert summary.popular == 1
    assert summary.codename_files == 1
    assert summary.manufacturer_files == 2
    assert summary.dropped == 4


def test_existing_files_are_overwritten(tmp_path):
    target = tmp_path / "devices.json"
    target.write_text("stale", encoding="utf-8")
    JsonEmitter(tmp_path).generate([], [])
    assert read_json(target) == []


def test_write_failure_is_wrapped(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OutputWriteError):
        write_json(blocker / "devices.json", [])
