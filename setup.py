from setuptools import setup, find_packages

setup(
    name="utilbelt",
    version="0.1.0",
    description="Stateless helpers for durations, rounding, progress bars, pagination and JSON bodies",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "utilbelt=utilbelt.cli:main",
        ],
    },
)
