# setup.py
from setuptools import setup, find_packages

setup(
    name="objkit",
    version="1.0.0",
    description="Wavefront OBJ/MTL loader",
    packages=find_packages(include=["objkit", "objkit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "Pillow>=9.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
