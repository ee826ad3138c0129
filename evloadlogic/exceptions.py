class EVLError(Exception): ...


class ResourceNotFound(EVLError, FileNotFoundError): ...


class FormatError(EVLError): ...


class ConfigurationError(EVLError): ...


class DegenerateInputError(EVLError): ...


class RangeError(EVLError, ValueError): ...


def require(condition: bool, message: str, exc: type[EVLError] = EVLError):
    """Raise the given exception if condition is False."""
    if not condition:
        raise exc(message)
