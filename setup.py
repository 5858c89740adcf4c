# setup.py
from setuptools import setup, find_packages

setup(
    name="pilang",
    version="0.1.0",
    description="Interpreter for a small bracket-delimited list language",
    packages=find_packages(include=["pilang", "pilang.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pilang = pilang.cli:main"],
    },
    zip_safe=False,
)
