# setup.py - Package the paired binary hierarchy engine
from setuptools import setup, find_packages

setup(
    name="paired_binary",
    version="0.1.0",
    description="Self-similar hierarchies of complementary bit patterns",
    packages=find_packages(include=["paired_binary", "paired_binary.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "pyyaml>=6.0",
        "click>=8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "paired-binary=paired_binary.cli:main",
        ],
    },
)
