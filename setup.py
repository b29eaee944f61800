"""
Setup script for katas.

Katas is a terminal tracker for recurring programming exercises.
It keeps a YAML list of katas with their completion dates and shows
a mastery level that grows with repetition and decays with time.

The 'katas' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="katas",
    version="1.0.0",
    description="Terminal tracker for recurring programming katas",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(include=["katas", "katas.*"]),
    package_data={"katas.store": ["default_katas.yaml"]},
    python_requires=">=3.11",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Storage
        "pyyaml>=6.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "katas=katas.cli.katas_cli:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="katas practice mastery cli",
)
