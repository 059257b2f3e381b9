from setuptools import setup, find_packages

import os

version_file_path = os.path.join(
	os.path.dirname(os.path.abspath(__file__)),
	"serializableobject",
	"version.py"
)

version = {}
with open(version_file_path) as f:
	exec(f.read(), version)
version = version["__version__"]

with open("README.md") as f:
    long_description = f.read()

setup(
    name = "SerializableObject",
    version = version,
    description = "Recursive conversion of object graphs to and from JSON-compatible data.",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    license = "Apache 2.0",
    packages = find_packages(exclude = [ "tests", "tests.*" ]),
    install_requires = [
        "pyyaml>=5.1.2,<7"
    ],
    extras_require = {
        "test": [
            "pytest>=6"
        ]
    },
    python_requires = ">=3.7, <4",
    zip_safe = False,
    classifiers = [
        "Development Status :: 4 - Beta",

        "Intended Audience :: Developers",

        "Topic :: Software Development :: Libraries :: Python Modules",

        "License :: OSI Approved :: Apache Software License",

        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8"
    ]
)
