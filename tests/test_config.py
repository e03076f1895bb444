import json

import pytest

from bfrtkit.config import (
    Configuration,
    DeviceConfig,
    P4Pipeline,
    P4Program,
    load_configuration,
)

SAMPLE = {
    "chip_list": [],
    "p4_devices": [
        {
            "device-id": 0,
            "p4_programs": [
                {
                    "program-name": "traffic_gen",
                    "bfrt-config": "share/traffic_gen/bf-rt.json",
                    "p4_pipelines": [
                        {
                            "p4_pipeline_name": "pipe",
                            "context": "share/traffic_gen/pipe/context.json",
                            "config": "share/traffic_gen/pipe/tofino.bin",
                            "pipe_scope": [0, 1, 2, 3],
                        }
                    ],
                }
            ],
        }
    ],
}


def test_load_from_file(tmp_path):
    path = tmp_path / "traffic_gen.conf"
    path.write_text(json.dumps(SAMPLE))
    config = load_configuration(path)
    device = config.p4_devices[0]
    assert device.device_id == 0
    program = device.p4_programs[0]
    assert program.program_name == "traffic_gen"
    assert program.bfrt_config == "share/traffic_gen/bf-rt.json"
    pipeline = program.p4_pipelines[0]
    assert pipeline.p4_pipeline_name == "pipe"
    assert pipeline.pipe_scope == [0, 1, 2, 3]


def test_underscore_field_names():
    data = {
        "program_name": "example",
        "bfrt_config": "bf-rt.json",
        "p4_pipelines": [],
    }
    program = P4Program.from_dict(data)
    assert program == P4Program("example", "bf-rt.json", [])


def test_device_underscore_id():
    device = DeviceConfig.from_dict({"device_id": 2, "p4_programs": []})
    assert device.device_id == 2
    assert device.p4_programs == []


def test_pipeline_missing_field():
    with pytest.raises(KeyError):
        P4Pipeline.from_dict({"p4_pipeline_name": "pipe", "context": "c", "config": "b"})


def test_missing_program_name():
    with pytest.raises(KeyError):
        P4Program.from_dict({"bfrt-config": "x", "p4_pipelines": []})


def test_from_dict_matches_file(tmp_path):
    path = tmp_path / "example.conf"
    path.write_text(json.dumps(SAMPLE))
    assert load_configuration(str(path)) == Configuration.from_dict(SAMPLE)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_configuration(tmp_path / "absent.conf")


def test_invalid_json(tmp_path):
    path = tmp_path / "bad.conf"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_configuration(path)