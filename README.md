# bfrtkit

`bfrtkit` reads the pipeline description that a BFRuntime-controlled,
P4-programmable switch publishes for a loaded program (the `bfrt.json`
schema), and the device configuration files written by the P4 compiler. It
gives typed, read-only access to tables, key fields, actions, action
parameters, singleton data fields and learn filters, and packs values into
the exact byte widths the switch expects.

Nothing outside the standard library is needed.

## Installation

```
pip install bfrtkit
```

## Loading a pipeline description

```python
from pathlib import Path

from bfrtkit.info import BfrtInfo

info = BfrtInfo.from_json(Path("bfrt.json").read_bytes())

table = info.table("ingress.exact_forward")   # matches "pipe.ingress.exact_forward" too
key = table.key_by_name("ig_intr_md.ingress_port")
print(key.id, key.match_type, key.field_type.bit_width())

action = table.action_by_name("ingress.do_forward")
param = action.action_data_by_name("e_port")
print(param.id, action.action_data_width("e_port"))
```

`BfrtInfo.from_dict` builds the same model from an already decoded JSON
object. Further lookups:

- `BfrtInfo.table_by_id(table_id)` and `BfrtInfo.add_table(table)` to find a
  table by id or append one (for example the internal tables of a second
  description).
- `BfrtInfo.learn_filter(filter_id)` for the learn filter behind a digest,
  and `LearnFilter.field_name_by_id(field_id)` for the names of its fields.
- On a `BfrtTable`: `key_by_id`, `action_by_id`, `singleton_by_name`,
  `singleton_by_id`, and `action_param_name(action_id, field_id)`, which for
  direct match-action tables looks in the action's parameters first and the
  table's singletons second.

Table kinds are given by `bfrtkit.types.TableType`; names the model does not
know become `TableType.UNKNOWN` (see `parse_table_type`). Field widths come
from `FieldType.bit_width()`: `uint8`/`16`/`32`/`64`, `bool` (1 bit),
`string` (nominal 32 bits) and `bytes` (the width given in the schema). Any
other type name raises `ValueError`.

## Packing values

`bfrtkit.convert.convert(value, name, width)` strips leading zero bytes from
a big-endian value and pads it to the number of bytes a field of `width` bits
occupies:

```python
from bfrtkit.convert import convert

convert(b"\x00\x00\x14", "e_port", 9)   # b"\x00\x14"
```

A value that is still too long raises `bfrtkit.errors.ConvertError`. With the
width `bfrtkit.convert.STRING_WIDTH` the value is returned unchanged.

## Compiler configuration files

```python
from bfrtkit.config import load_configuration

config = load_configuration("example.conf")
for program in config.p4_devices[0].p4_programs:
    print(program.program_name, program.bfrt_config)
    for pipeline in program.p4_pipelines:
        print(pipeline.p4_pipeline_name, pipeline.context, pipeline.config, pipeline.pipe_scope)
```

Both the underscore and the hyphenated key spellings (`program-name`,
`bfrt-config`, `device-id`) are accepted.

## Errors

Lookups that fail raise a subclass of `bfrtkit.errors.BfrtError`, such as
`UnknownTableError`, `UnknownKeyNameError`, `UnknownActionNameError` or
`UnknownActionDataNameError`, with a message that names what was missing and
attributes holding the values involved. Missing keys in a schema or
configuration file raise `KeyError`.

## What this package does not do

`bfrtkit` is a model of the schema and configuration files only. It does not
connect to a switch, speak gRPC, push a program onto a device, build or send
table read, write, update or delete requests, read registers, or receive
digests. The error classes for such operations (`SwitchConnectionError`,
`GrpcError`, `RequestEmptyError` and others) are defined for code that does
this on top of the model.

## Running the tests

```
pip install -e ".[test]"
pytest
```