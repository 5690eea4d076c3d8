"""
setup.py for the layered-i18n package.

Usage:
    pip install -e .[test]
"""
from pathlib import Path

from setuptools import find_packages, setup

version = {}
exec((Path(__file__).parent / "layered_i18n" / "__version__.py").read_text(), version)

setup(
    name="layered-i18n",
    version=version["__version__"],
    description="Dotted-key translation lookup over YAML locale files merged from several paths",
    packages=find_packages(include=["layered_i18n", "layered_i18n.*"]),
    python_requires=">=3.10",
    install_requires=[
        "PyYAML>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
