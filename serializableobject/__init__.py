# Version
from .version import __version__

# Modules on this level
from .class_registry import ClassRegistry
from .format_config import FormatConfig
from .formats import toJSON, fromJSON, toYAML, fromYAML
from .not_registered_error import NotRegisteredError
from .serializable_object import SerializableObject
from .types import CLASS_KEY, JSONSerializable
