from .class_registry import ClassRegistry
from .not_registered_error import NotRegisteredError
from .types import CLASS_KEY

# Other imports only for the type hints
from typing import Any, ClassVar, Dict
from .types import JSONSerializable

class SerializableObject:
    """
    Base class for objects that can be converted to and from a plain, JSON-compatible value tree.

    The state of an instance is formed by its own attributes, as returned by :func:`vars`. Every
    attribute is converted recursively: nested instances of this class serialize themselves and carry
    the name of their class in the reserved ``_class`` key, lists, tuples and dictionaries are copied
    element-wise and strings, numbers, booleans and :obj:`None` are copied as they are. Attributes
    holding any other value, e.g. functions, sets or foreign objects, are left out.

    Every subclass has to be registered before it can be instantiated::

        class Point(SerializableObject):
            pass

        SerializableObject.register(Point)

        point = Point()
        point.x = 3
        point.y = 4

        point.serialize() # { "_class": "Point", "x": 3, "y": 4 }

    Subclasses can customize the conversion by overriding the hooks :meth:`_preSerialize`,
    :meth:`_postSerialize`, :meth:`_preDeserialize` and :meth:`_postDeserialize`.

    Subclasses which define their own ``__init__`` have to call ``super().__init__()`` and must be
    constructible without arguments, as deserialization creates instances that way.

    Keys of a serialized value which name a method of the class, e.g. ``_postDeserialize``, are
    ignored on deserialization, just like ``_class``.

    Object graphs containing cycles are not supported, serializing them ends in a
    :exc:`RecursionError`.
    """

    registry: ClassVar[ClassRegistry]

    def __init__(self) -> None:
        """
        Raises:
            :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if the class of this
                instance has not been registered, or if another class has since been registered
                under its name.
        """

        registry = type(self).registry

        if registry.lookup(type(self).__name__) is not type(self):
            raise NotRegisteredError(type(self).__name__, registry.base.__name__)

    @classmethod
    def register(cls, subclass: type) -> type:
        """
        Register a class with the registry of this class, so that instances of it can be constructed
        and deserialized. Can be used as a class decorator.

        Args:
            subclass: The class to register.

        Returns:
            The registered class.

        Raises:
            :exc:`TypeError`: if the class is not a subclass of the base class of the registry.
        """

        return cls.registry.register(subclass)

    def serialize(self) -> JSONSerializable:
        """
        Returns:
            A representation of this instance which consists only of primitive data types, lists and
            dictionaries, tagged with the name of the class of this instance. The value returned by
            this method is safe to be serialized to JSON and other formats with similar
            capabilities. Attributes holding anything else, e.g. functions, sets or objects not
            derived from this class, are left out.
        """

        serialized: Dict[str, JSONSerializable] = {}

        self._preSerialize(serialized)

        serialized[CLASS_KEY] = type(self).__name__

        for name, value in vars(self).items():
            if SerializableObject.__isData(value):
                serialized[name] = SerializableObject.__serializeValue(value)

        self._postSerialize(serialized)

        return serialized

    @staticmethod
    def __isData(value: Any) -> bool:
        return isinstance(value, _DATA_TYPES)

    @staticmethod
    def __serializeValue(value: Any) -> JSONSerializable:
        if isinstance(value, SerializableObject):
            return value.serialize()

        if isinstance(value, (list, tuple)):
            return [
                SerializableObject.__serializeValue(x)
                for x in value
                if SerializableObject.__isData(x)
            ]

        if isinstance(value, dict):
            return {
                k: SerializableObject.__serializeValue(v)
                for k, v in value.items()
                if SerializableObject.__isData(v)
            }

        return value

    @classmethod
    def deserialize(cls, serialized: JSONSerializable) -> Any:
        """
        Rebuild a value from its serialized form. Every dictionary carrying the ``_class`` key is
        turned into a new instance of the class registered under that name, lists and other
        dictionaries are rebuilt recursively and all other values are returned unchanged.

        Args:
            serialized: A value as returned by :meth:`serialize` or any value of the same shape.

        Returns:
            A new instance, list, dictionary or the unchanged primitive value.

        Raises:
            :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if the class tag of
                the value or of any value nested in it has not been registered. No partial result is
                returned in that case.
        """

        if isinstance(serialized, (list, tuple)):
            return [ cls.deserialize(x) for x in serialized ]

        if not isinstance(serialized, dict):
            return serialized

        if CLASS_KEY not in serialized:
            return { k: cls.deserialize(v) for k, v in serialized.items() }

        instance = cls.registry.lookup(serialized[CLASS_KEY])()

        instance._preDeserialize(serialized) # pylint: disable=protected-access

        for name, value in serialized.items():
            if name == CLASS_KEY or callable(getattr(type(instance), name, None)):
                continue

            setattr(instance, name, cls.deserialize(value))

        instance._postDeserialize(serialized) # pylint: disable=protected-access

        return instance

    def _preSerialize(self, serialized: Dict[str, JSONSerializable]) -> None:
        """
        Called before the attributes of this instance are copied. Override this method to modify
        the state of this instance before it gets serialized.

        Args:
            serialized: The (still empty) dictionary that will be returned by :meth:`serialize`.
        """

    def _postSerialize(self, serialized: Dict[str, JSONSerializable]) -> None:
        """
        Called after the attributes of this instance were copied. Override this method to add or
        replace entries of the serialized form without touching this instance.

        Args:
            serialized: The dictionary that will be returned by :meth:`serialize`.
        """

    def _preDeserialize(self, serialized: Dict[str, JSONSerializable]) -> None:
        """
        Called on the freshly constructed instance before the serialized attributes are copied onto
        it.

        Args:
            serialized: The serialized form this instance is built from.
        """

    def _postDeserialize(self, serialized: Dict[str, JSONSerializable]) -> None:
        """
        Called after all serialized attributes were copied onto this instance.

        Args:
            serialized: The serialized form this instance was built from.
        """

SerializableObject.registry = ClassRegistry(SerializableObject)

# Values that make up the serialized form, everything else is left out
_DATA_TYPES = (SerializableObject, list, tuple, dict, str, int, float, bool, type(None))
