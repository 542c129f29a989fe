from setuptools import find_packages, setup

setup(
    name="filterview",
    version="1.0.0",
    description="Streaming FIR filtering and centered spectrum analysis.",
    packages=find_packages(include=["filterview", "filterview.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "matplotlib",
        "click",
        "tabulate",
        "rich",
        "pydantic>=2",
        "toml",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
        ],
    },
    entry_points={
        "console_scripts": [
            "filterview=filterview.cli.main:cli",
        ],
    },
)
