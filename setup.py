# setup.py
from setuptools import setup, find_packages

setup(
    name="kappa",
    version="0.1.0",
    description="Lexer, parser and syntax analyzer for a Scheme-like language",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["kappa = kappa.cli:main"],
    },
    zip_safe=False,
)
