"""
Entry point for running katas as a module.

Usage:
    python -m katas
    python -m katas done fizzbuzz
    python -m katas --help
"""
from katas.cli.katas_cli import run

if __name__ == "__main__":
    run()
