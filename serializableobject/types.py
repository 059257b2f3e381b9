from typing import Dict, Union, List

ClassName = str

# Some types are ignored because the mypy checker complains on recursive types.
JSONSerializable = Union[          # type: ignore
    List["JSONSerializable"],      # type: ignore
    Dict[str, "JSONSerializable"], # type: ignore
    str,
    int,
    float,
    bool,
    None
]

# The reserved key holding the class tag of a serialized instance
CLASS_KEY = "_class"
