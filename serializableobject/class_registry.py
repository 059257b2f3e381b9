from .has_logger import HasLogger
from .not_registered_error import NotRegisteredError

# Other imports only for the type hints
from typing import Dict, Tuple, Type, TypeVar
from .types import ClassName

C = TypeVar("C", bound=type) # pylint: disable=invalid-name

class ClassRegistry(HasLogger):
    """
    A mapping from class names to classes, used to validate construction of serializable instances
    and to resolve the class tags found in serialized values.

    Classes are registered under their ``__name__``. Registering the same class twice has no effect.
    Registering a different class under a name that is already taken replaces the previous entry, the
    last registration wins and a warning is logged.
    """

    def __init__(self, base: type):
        """
        Args:
            base: The base class of the hierarchy this registry serves. The base class is registered
                implicitly and its name is used in error messages.
        """

        super().__init__()

        self.__base = base
        self.__classes: Dict[ClassName, type] = { base.__name__: base }

    @property
    def base(self) -> type:
        return self.__base

    @property
    def names(self) -> Tuple[ClassName, ...]:
        """
        Returns:
            The names of all registered classes, sorted alphabetically.
        """

        return tuple(sorted(self.__classes.keys()))

    def register(self, cls: C) -> C:
        """
        Args:
            cls: The class to register.

        Returns:
            The class itself, which allows using this method as a class decorator.

        Raises:
            :exc:`TypeError`: if the class does not derive from the base class of this registry.
        """

        if not (isinstance(cls, type) and issubclass(cls, self.__base)):
            raise TypeError("{!r} is not a subclass of {}.".format(cls, self.__base.__name__))

        name = cls.__name__

        previous = self.__classes.get(name)
        if previous is cls:
            return cls

        if previous is not None:
            self._logger.warning(
                "Replacing %s.%s with %s.%s as the class registered under the name \"%s\".",
                previous.__module__,
                previous.__qualname__,
                cls.__module__,
                cls.__qualname__,
                name
            )
        else:
            self._logger.debug("Registering %s as a %s.", name, self.__base.__name__)

        self.__classes[name] = cls
        return cls

    def unregister(self, name: ClassName) -> None:
        """
        Args:
            name: The name of the class to remove from this registry.

        Raises:
            :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if no class is
                registered under that name.
            :exc:`ValueError`: if the name belongs to the base class of this registry.
        """

        if name == self.__base.__name__:
            raise ValueError("The base class {} can not be unregistered.".format(name))

        # Raises if the name is unknown
        self.lookup(name)

        del self.__classes[name]
        self._logger.debug("Unregistered %s.", name)

    def isRegistered(self, name: ClassName) -> bool:
        return name in self.__classes

    def lookup(self, name: ClassName) -> Type:
        """
        Args:
            name: The name of the class to look up.

        Returns:
            The class registered under that name.

        Raises:
            :exc:`~serializableobject.not_registered_error.NotRegisteredError`: if no class is
                registered under that name.
        """

        try:
            return self.__classes[name]
        except KeyError:
            raise NotRegisteredError(name, self.__base.__name__) from None

    def __contains__(self, name: object) -> bool:
        return name in self.__classes

    def __len__(self) -> int:
        return len(self.__classes)
