#!/usr/bin/env python
import os
import re

from setuptools import setup

current_dir = os.path.dirname(os.path.abspath(__file__))


def version():
    with open(os.path.join(current_dir, "ratio", "__init__.py")) as f:
        return re.search(r'__version__ = "(.*)"', f.read()).group(1)


setup(
    name="ratio",
    version=version(),
    description="Exact rational arithmetic over Python and numpy integers",
    author="Dean Shaff",
    author_email="dean.shaff@gmail.com",
    packages=["ratio"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "numba"
    ],
    extras_require={
        "test": ["pytest"]
    }
)
