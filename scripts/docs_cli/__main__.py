#!/usr/bin/env python3
"""Entry point for running as module: python -m docs_cli"""
from docs_cli.cli import main

if __name__ == "__main__":
    main()
