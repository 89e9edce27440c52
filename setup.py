from setuptools import setup, find_packages

setup(
    name="chronos-stopwatch",
    version="0.1.0",
    description="Drift-free terminal stopwatch with laps & lap statistics",
    packages=find_packages(include=["chronos", "chronos.*"]),
    install_requires=[
        "typer",
        "rich",
        "readchar",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "chronos=chronos.main:main",
        ],
    },
    python_requires=">=3.11",
)
