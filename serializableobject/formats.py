import json

import yaml

from .format_config import FormatConfig
from .serializable_object import SerializableObject

# Other imports only for the type hints
from typing import Any, Optional, Type
from .types import JSONSerializable

def _toSerialized(value: Any) -> JSONSerializable:
    if isinstance(value, SerializableObject):
        return value.serialize()

    return value

def toJSON(value: Any, config: Optional[FormatConfig] = None) -> str:
    """
    Args:
        value: An instance of :class:`~serializableobject.serializable_object.SerializableObject`,
            which is serialized first, or an already serialized value.
        config: The formatting settings. Defaults to a compact representation.

    Returns:
        The JSON text.

    Raises:
        :exc:`TypeError`: if the serialized value contains data JSON can not represent.
    """

    config = FormatConfig() if config is None else config

    return json.dumps(_toSerialized(value), indent=config.indent, sort_keys=config.sort_keys)

def fromJSON(text: str, base: Type[SerializableObject] = SerializableObject) -> Any:
    """
    Args:
        text: JSON text, as returned by :func:`toJSON`.
        base: The class whose registry resolves the class tags found in the data.

    Returns:
        The deserialized value.

    Raises:
        :exc:`json.JSONDecodeError`: if the text is not valid JSON.
        :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if the data contains an
            unregistered class tag.
    """

    return base.deserialize(json.loads(text))

def toYAML(value: Any, config: Optional[FormatConfig] = None) -> str:
    """
    Args:
        value: An instance of :class:`~serializableobject.serializable_object.SerializableObject`,
            which is serialized first, or an already serialized value.
        config: The formatting settings. The indentation defaults to the YAML default of two spaces.

    Returns:
        The YAML text, using the block style.

    Raises:
        :exc:`yaml.representer.RepresenterError`: if the serialized value contains data YAML can
            not represent safely.
    """

    config = FormatConfig() if config is None else config

    return yaml.safe_dump(
        _toSerialized(value),
        indent             = config.indent,
        sort_keys          = config.sort_keys,
        default_flow_style = False
    )

def fromYAML(text: str, base: Type[SerializableObject] = SerializableObject) -> Any:
    """
    Args:
        text: YAML text, as returned by :func:`toYAML`.
        base: The class whose registry resolves the class tags found in the data.

    Returns:
        The deserialized value.

    Raises:
        :exc:`yaml.YAMLError`: if the text is not valid YAML.
        :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if the data contains an
            unregistered class tag.
    """

    return base.deserialize(yaml.safe_load(text))
