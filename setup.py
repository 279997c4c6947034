import os

from setuptools import setup, find_packages

# Read the version without importing the package and its dependencies
version_ns = {}
with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), "logvalues", "version.py")) as f:
    exec(f.read(), version_ns)
__version__ = version_ns["__version__"]

setup(
    name="logvalues",
    version=__version__,
    packages=find_packages(include=["logvalues", "logvalues.*"]),
    install_requires=[
        "lark>=1.1.5",
        "typer>=0.9.0",
        "pydantic>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "logvalues=logvalues.main:app",
        ],
    },
    python_requires=">=3.9",
)
