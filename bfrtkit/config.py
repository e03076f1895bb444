"""Loading the compiler's device configuration file."""

import json
from dataclasses import dataclass
from pathlib import Path


def _pick(data, *names):
    for name in names:
        if name in data:
            return data[name]
    raise KeyError(names[0])


@dataclass
class P4Pipeline:
    """One pipeline profile of a P4 program."""

    p4_pipeline_name: str
    context: str
    config: str
    pipe_scope: list[int]

    @classmethod
    def from_dict(cls, data):
        return cls(
            p4_pipeline_name=data["p4_pipeline_name"],
            context=data["context"],
            config=data["config"],
            pipe_scope=list(data["pipe_scope"]),
        )


@dataclass
class P4Program:
    """A compiled P4 program and the files that describe it."""

    program_name: str
    bfrt_config: str
    p4_pipelines: list[P4Pipeline]

    @classmethod
    def from_dict(cls, data):
        return cls(
            program_name=_pick(data, "program_name", "program-name"),
            bfrt_config=_pick(data, "bfrt_config", "bfrt-config"),
            p4_pipelines=[P4Pipeline.from_dict(p) for p in data["p4_pipelines"]],
        )


@dataclass
class DeviceConfig:
    """Programs configured for one device."""

    device_id: int
    p4_programs: list[P4Program]

    @classmethod
    def from_dict(cls, data):
        return cls(
            device_id=_pick(data, "device_id", "device-id"),
            p4_programs=[P4Program.from_dict(p) for p in data["p4_programs"]],
        )


@dataclass
class Configuration:
    """The whole configuration file: a list of devices."""

    p4_devices: list[DeviceConfig]

    @classmethod
    def from_dict(cls, data):
        return cls(p4_devices=[DeviceConfig.from_dict(d) for d in data["p4_devices"]])


def load_configuration(path):
    """Read and parse a JSON configuration file."""
    with Path(path).open(encoding="utf-8") as fh:
        return Configuration.from_dict(json.load(fh))