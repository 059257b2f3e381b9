import yaml

# Other imports only for the type hints
from typing import Optional

class FormatConfig:
    """
    Settings for the text formats provided by :mod:`serializableobject.formats`.
    """

    def __init__(self, indent: Optional[int] = None, sort_keys: bool = False):
        """
        Args:
            indent: The number of spaces to indent nested structures with. :obj:`None` selects the
                most compact representation the format offers.
            sort_keys: A boolean indicating whether the keys of mappings are written in sorted
                order instead of insertion order.
        """

        self.__indent    = indent
        self.__sort_keys = sort_keys

    @classmethod
    def fromFile(cls, path: str) -> "FormatConfig":
        """
        Load the settings from a YAML file, e.g.::

            indent: 2
            sort_keys: true

        Args:
            path: The path to the YAML file.

        Returns:
            The loaded configuration. Settings missing from the file keep their defaults.

        Raises:
            :exc:`OSError`: if the file could not be read.
            :exc:`yaml.YAMLError`: if the file does not contain valid YAML.
            :exc:`TypeError`: if the file does not contain a mapping or contains unknown settings.
        """

        with open(path) as f:
            settings = yaml.safe_load(f)

        # An empty file loads as None
        if settings is None:
            settings = {}

        if not isinstance(settings, dict):
            raise TypeError("The format configuration has to be a mapping of settings.")

        return cls(**settings)

    @property
    def indent(self) -> Optional[int]:
        return self.__indent

    @property
    def sort_keys(self) -> bool:
        return self.__sort_keys
