#!/usr/bin/env python3
"""
Descriptive Statistics — Sample Summary
=======================================
Thin entry-point. All logic lives in src.describe.

Modes:
  Literal sample:  python3 describe_sample.py
  Text file:       python3 describe_sample.py data/sample.txt
  Weighted:        python3 describe_sample.py data/sample.txt --weights w.txt
"""

from src.describe.cli import main

if __name__ == "__main__":
    main()
