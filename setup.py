# setup.py
from setuptools import setup, find_packages

setup(
    name="annealer",
    version="0.1.0",
    description="Generic simulated annealing engine with parallel restarts",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "annealer = annealer.cli:main",
        ],
    },
)
