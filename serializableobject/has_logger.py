import logging

# Other imports only for the type hints
from typing import Optional

class HasLogger:
    """
    Base class for classes that want to make use of the Python :mod:`logging`-library. Loggers are
    placed below the ``serializableobject`` logger, so that applications can tune the verbosity of
    the whole package at once.
    """

    def __init__(self, logger_title: Optional[str] = None):
        """
        Args:
            logger_title: The title of the logger to use for this instance, relative to the package
                logger. Defaults to the class name if omitted or set to :obj:`None`.
        """

        title = self.__class__.__name__ if logger_title is None else logger_title

        self.__logger_name = "{}.{}".format(__name__.split(".")[0], title)

    @property
    def _logger(self) -> logging.Logger:
        """
        Returns:
            The logger named after the title chosen during construction.
        """

        return logging.getLogger(self.__logger_name)
