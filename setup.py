"""Setup configuration for evented-spec."""

from setuptools import setup, find_packages

setup(
    name="evented-spec",
    version="0.1.0",
    description="Run test examples inside an externally driven event loop",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.11",
    install_requires=[
        "pyyaml>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
)
