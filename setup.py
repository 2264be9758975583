from setuptools import find_packages, setup

setup(
    name="pathslash",
    version="0.1.0",
    description="Convert file paths to and from portable slash paths",
    packages=find_packages(include=["pathslash", "pathslash.*"]),
    python_requires=">=3.12",  # pathlib parses \\?\UNC\server\share drives from 3.12
    install_requires=[
        "pydantic>=2",  # Configuration validation
        "typer<0.26",  # Command line interface (click-based releases)
        "click",  # Imported directly by the CLI
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
        ],
    },
    entry_points={
        "console_scripts": [
            "pathslash=pathslash.cli:main",
        ],
    },
)
