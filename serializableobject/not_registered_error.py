# Other imports only for the type hints
from .types import ClassName

class NotRegisteredError(LookupError):
    """
    Raised when a class name can not be resolved through a
    :class:`~serializableobject.class_registry.ClassRegistry`, either while constructing an instance
    of an unregistered class or while deserializing a value tagged with an unknown class name.
    """

    def __init__(self, class_name: ClassName, base_name: ClassName):
        """
        Args:
            class_name: The name that could not be resolved.
            base_name: The name of the base class of the registry that was asked.
        """

        super().__init__("{} has not been registered as a {}".format(class_name, base_name))

        self.__class_name = class_name
        self.__base_name  = base_name

    @property
    def class_name(self) -> ClassName:
        return self.__class_name

    @property
    def base_name(self) -> ClassName:
        return self.__base_name
