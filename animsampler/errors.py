"""Exceptions raised by the extraction pipeline."""


class ExtractionError(RuntimeError):
    """Base class of recoverable extraction failures."""


class LookupFailure(ExtractionError, LookupError):
    """A named node or property does not exist in the scene."""


class NodeNotFoundError(LookupFailure):
    def __init__(self, node_name: str):
        super().__init__(f'Invalid node name "{node_name}"')
        self.node_name = node_name


class PropertyNotFoundError(LookupFailure):
    def __init__(self, property_name: str):
        super().__init__(f'Invalid property name "{property_name}"')
        self.property_name = property_name


class ConversionError(ExtractionError):
    """Transform matrix cannot be expressed as translation/rotation/scale."""


class UnsupportedValueKindError(ExtractionError):
    def __init__(self, kind):
        super().__init__(f'Unsupported track type: "{kind.describe()}"')
        self.kind = kind


class PropertyReadError(ExtractionError):
    """Evaluated property value does not match its declared kind."""


class EmptyInputError(ExtractionError):
    """The scene holds no animation clip."""


class StructuralInvariantError(AssertionError):
    """Built output is malformed. Indicates a bug, never caught by the library."""
