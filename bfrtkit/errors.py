"""Exceptions raised while talking to a BF Runtime switch or reading its schema."""


class BfrtError(Exception):
    """Base class for every error raised by the package."""


class SwitchConnectionError(BfrtError):
    """The switch could not be reached."""

    def __init__(self, ip, port, original):
        self.ip = ip
        self.port = port
        self.original = original
        super().__init__(f"Connection to `{ip}:{port}` not possible. Original: `{original}`")


class ForwardingPipelineError(BfrtError):
    """The forwarding pipeline configuration could not be fetched."""

    def __init__(self, device_id, client_id, original):
        self.device_id = device_id
        self.client_id = client_id
        self.original = original
        super().__init__(
            f"Unable to get forwarding pipeline for device_id {device_id} "
            f"and client_id {client_id}. Original: `{original}`"
        )


class P4ProgramError(BfrtError):
    """The named P4 program is not loaded on the device."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"P4 program {name} does not exist.")


class PipeError(BfrtError):
    """The requested pipe does not exist."""

    def __init__(self, pipe_id):
        self.pipe_id = pipe_id
        super().__init__(f"Pipe {pipe_id} does not exist.")


class UnknownActionIdError(BfrtError):
    def __init__(self, action_id):
        self.action_id = action_id
        super().__init__(f"Action id {action_id} does not exist.")


class UnknownActionNameError(BfrtError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Action {name} does not exist.")


class UnknownSingletonNameError(BfrtError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Singleton/Register param {name} does not exist.")


class UnknownSingletonIdError(BfrtError):
    def __init__(self, singleton_id):
        self.singleton_id = singleton_id
        super().__init__(f"Register/Singleton param id {singleton_id} does not exist.")


class UnknownKeyIdError(BfrtError):
    def __init__(self, key_id, table_name):
        self.key_id = key_id
        self.table_name = table_name
        super().__init__(f"Table {table_name} does not have key with id {key_id}.")


class UnknownKeyNameError(BfrtError):
    def __init__(self, name, table_name):
        self.name = name
        self.table_name = table_name
        super().__init__(f"Table {table_name} does not have key {name}.")


class UnknownTableError(BfrtError):
    def __init__(self, table_name):
        self.table_name = table_name
        super().__init__(f"Table {table_name} does not exist.")


class UnknownTableIdError(BfrtError):
    def __init__(self, table_id):
        self.table_id = table_id
        super().__init__(f"Table id {table_id} does not exist.")


class UnknownReadResultError(BfrtError):
    def __init__(self):
        super().__init__("Read result was not a table entry.")


class UnknownLearnFilterError(BfrtError):
    def __init__(self, filter_id):
        self.filter_id = filter_id
        super().__init__(f"Learn filter with id {filter_id} does not exist.")


class UnknownLearnFilterFieldError(BfrtError):
    def __init__(self, field_id):
        self.field_id = field_id
        super().__init__(f"Learn filter field with id {field_id} does not exist.")


class ConvertError(BfrtError, ValueError):
    """A value does not fit into a field of the given bit width."""

    def __init__(self, value, name, width):
        self.value = bytes(value)
        self.name = name
        self.width = width
        super().__init__(
            f"Value {list(self.value)} does not fit into {name} with width {width} bits."
        )


class UnknownActionDataIdError(BfrtError):
    def __init__(self, data_id, action_name):
        self.data_id = data_id
        self.action_name = action_name
        super().__init__(f"Action data with id {data_id} does not exist on action {action_name}.")


class UnknownActionDataNameError(BfrtError):
    def __init__(self, name, action_name):
        self.name = name
        self.action_name = action_name
        super().__init__(f"Action data {name} does not exist on action {action_name}.")


class PortNotFoundError(BfrtError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Port {name} does not exist.")


class GrpcError(BfrtError):
    """The switch answered a call with an error status."""

    def __init__(self, message, details):
        self.message = message
        self.details = details
        super().__init__(f"GRPC error: {message}. Details: {details}.")


class MissingRegisterIndexError(BfrtError):
    def __init__(self):
        super().__init__("Register index is missing.")


class ByteConversionError(BfrtError):
    def __init__(self, target, original):
        self.target = target
        self.original = original
        super().__init__(f"Cannot convert Bytes to {target}. Original: `{original}`")


class RequestEmptyError(BfrtError):
    def __init__(self):
        super().__init__("Switch request is empty.")


class GenericError(BfrtError):
    def __init__(self, message):
        self.message = message
        super().__init__(f"Generic error occurred. Message: {message}.")